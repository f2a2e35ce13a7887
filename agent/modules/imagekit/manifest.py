"""ImageKit module manifest: tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

UPLOAD_OPTION_PARAMETERS = [
    ToolParameter(
        name="folder",
        type="string",
        description="Destination folder path. Default: /",
        required=False,
        default="/",
    ),
    ToolParameter(
        name="useUniqueFileName",
        type="boolean",
        description="Generate unique filename to avoid conflicts. Default: true",
        required=False,
        default=True,
    ),
    ToolParameter(
        name="isPrivateFile",
        type="boolean",
        description="Whether file should be private. Default: false",
        required=False,
        default=False,
    ),
    ToolParameter(
        name="overwriteFile",
        type="boolean",
        description="Whether to overwrite existing file with same name. Default: false",
        required=False,
        default=False,
    ),
    ToolParameter(
        name="tags",
        type="array",
        items_type="string",
        description="Tags to associate with the file",
        required=False,
    ),
    ToolParameter(
        name="customCoordinates",
        type="string",
        description="Custom focus coordinates for cropping (x,y,width,height)",
        required=False,
    ),
    ToolParameter(
        name="customMetadata",
        type="object",
        description="Custom metadata key-value pairs",
        required=False,
    ),
]

MANIFEST = ModuleManifest(
    module_name="imagekit",
    description="Manage the ImageKit.io media library: list, search, upload, move and delete files and folders, and generate transformation URLs.",
    version="1.0.0",
    tools=[
        ToolDefinition(
            name="imagekit.list_files",
            description=(
                "List and search files in ImageKit media library. "
                "Folders in the listed path are included. "
                "Example: 'Show me the latest 10 images in /products.'"
            ),
            parameters=[
                ToolParameter(
                    name="path",
                    type="string",
                    description="Folder path to list files from. Default: /",
                    required=False,
                    default="/",
                ),
                ToolParameter(
                    name="searchQuery",
                    type="string",
                    description="Search query for file names (supports ImageKit search syntax)",
                    required=False,
                ),
                ToolParameter(
                    name="limit",
                    type="integer",
                    description="Number of files to return (1-1000). Default: 20",
                    required=False,
                    default=20,
                    minimum=1,
                    maximum=1000,
                ),
                ToolParameter(
                    name="skip",
                    type="integer",
                    description="Number of files to skip for pagination. Default: 0",
                    required=False,
                    default=0,
                    minimum=0,
                ),
                ToolParameter(
                    name="fileType",
                    type="string",
                    description="Filter by file type. Default: all",
                    required=False,
                    enum=["image", "non-image", "all"],
                    default="all",
                ),
                ToolParameter(
                    name="sort",
                    type="string",
                    description=(
                        "Sort order (ASC_CREATED, DESC_CREATED, ASC_NAME, DESC_NAME, "
                        "ASC_SIZE, DESC_SIZE). Default: DESC_CREATED"
                    ),
                    required=False,
                    default="DESC_CREATED",
                ),
            ],
        ),
        ToolDefinition(
            name="imagekit.list_folders",
            description="List folders in ImageKit.",
            parameters=[
                ToolParameter(
                    name="path",
                    type="string",
                    description="Folder path to list (default is root)",
                    required=False,
                    default="/",
                ),
            ],
        ),
        ToolDefinition(
            name="imagekit.get_file_details",
            description="Get detailed information about a specific file, including dimensions, tags and timestamps.",
            parameters=[
                ToolParameter(
                    name="fileId",
                    type="string",
                    description="The unique ID of the file",
                ),
            ],
        ),
        ToolDefinition(
            name="imagekit.upload_file",
            description="Upload a local file to ImageKit.",
            parameters=[
                ToolParameter(
                    name="filePath",
                    type="string",
                    description="Local path to the file to upload",
                ),
                ToolParameter(
                    name="fileName",
                    type="string",
                    description="Name for the uploaded file (defaults to original filename)",
                    required=False,
                ),
                *UPLOAD_OPTION_PARAMETERS,
            ],
            required_permission="user",
        ),
        ToolDefinition(
            name="imagekit.upload_file_from_url",
            description="Upload a file to ImageKit from a URL.",
            parameters=[
                ToolParameter(
                    name="url",
                    type="string",
                    format="uri",
                    description="URL of the file to upload",
                ),
                ToolParameter(
                    name="fileName",
                    type="string",
                    description="Name for the uploaded file",
                ),
                *UPLOAD_OPTION_PARAMETERS,
            ],
            required_permission="user",
        ),
        ToolDefinition(
            name="imagekit.upload_base64_file",
            description="Upload a file to ImageKit from base64 encoded data.",
            parameters=[
                ToolParameter(
                    name="base64Data",
                    type="string",
                    description="Base64 encoded file content (with or without data URI prefix)",
                ),
                ToolParameter(
                    name="fileName",
                    type="string",
                    description="Name for the uploaded file",
                ),
                *UPLOAD_OPTION_PARAMETERS,
            ],
            required_permission="user",
        ),
        ToolDefinition(
            name="imagekit.delete_file",
            description="Delete a file from ImageKit.",
            parameters=[
                ToolParameter(
                    name="fileId",
                    type="string",
                    description="The unique ID of the file to delete",
                ),
            ],
            required_permission="user",
        ),
        ToolDefinition(
            name="imagekit.create_folder",
            description="Create a new folder in ImageKit.",
            parameters=[
                ToolParameter(
                    name="folderName",
                    type="string",
                    description="Name of the folder to create",
                ),
                ToolParameter(
                    name="parentFolderPath",
                    type="string",
                    description="Parent folder path. Default: /",
                    required=False,
                    default="/",
                ),
            ],
            required_permission="user",
        ),
        ToolDefinition(
            name="imagekit.delete_folder",
            description="Delete a folder from ImageKit.",
            parameters=[
                ToolParameter(
                    name="folderPath",
                    type="string",
                    description="Full path of the folder to delete",
                ),
            ],
            required_permission="user",
        ),
        ToolDefinition(
            name="imagekit.move_file",
            description="Move a file to a different folder in ImageKit.",
            parameters=[
                ToolParameter(
                    name="sourceFilePath",
                    type="string",
                    description="Current full path of the file (e.g., /folder/image.jpg)",
                ),
                ToolParameter(
                    name="destinationPath",
                    type="string",
                    description="Destination folder path (e.g., /new-folder/)",
                ),
            ],
            required_permission="user",
        ),
        ToolDefinition(
            name="imagekit.generate_url",
            description=(
                "Generate an ImageKit URL with transformations (resize, crop, format, quality, etc.). "
                "Either 'path' or 'src' is required. "
                "Example: 'Give me a 300x300 signed URL for /products/shoe.jpg.'"
            ),
            parameters=[
                ToolParameter(
                    name="path",
                    type="string",
                    description="Image path relative to URL endpoint (e.g., /folder/image.jpg)",
                    required=False,
                ),
                ToolParameter(
                    name="src",
                    type="string",
                    description="Absolute image URL (alternative to path)",
                    required=False,
                ),
                ToolParameter(
                    name="transformation",
                    type="array",
                    items_type="object",
                    description="Array of transformation objects (e.g., [{height: 300, width: 300}])",
                    required=False,
                ),
                ToolParameter(
                    name="transformationPosition",
                    type="string",
                    description="Where to place transformation params. Default: path",
                    required=False,
                    enum=["path", "query"],
                    default="path",
                ),
                ToolParameter(
                    name="signed",
                    type="boolean",
                    description="Generate a signed URL. Default: false",
                    required=False,
                    default=False,
                ),
                ToolParameter(
                    name="expireSeconds",
                    type="integer",
                    description="Signed URL expiry in seconds, ignored unless signed. Default: 300",
                    required=False,
                    default=300,
                ),
            ],
        ),
    ],
)
