"""Tests for ImageKitTools against a mock gateway."""

from __future__ import annotations

import base64

import pytest

from modules.imagekit.models import (
    CreateFolderInput,
    DeleteFolderInput,
    FileIdInput,
    FileRecord,
    FolderRecord,
    GenerateUrlInput,
    ListFilesInput,
    ListFoldersInput,
    MoveFileInput,
    UploadBase64Input,
    UploadFileInput,
    UploadFromUrlInput,
)
from modules.imagekit.tests.fixtures import (
    DOCUMENT_ITEM,
    FOLDER_ITEM,
    IMAGE_ITEM,
    UPLOAD_RESPONSE,
)


@pytest.fixture
def uploaded(mock_client):
    mock_client.upload.return_value = FileRecord.model_validate(UPLOAD_RESPONSE)
    return mock_client


# ---------------------------------------------------------------------------
# list_files
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_list_files_default_params(tools, mock_client):
    mock_client.list_files.return_value = [FileRecord.model_validate(IMAGE_ITEM)]

    result = await tools.list_files(ListFilesInput())

    mock_client.list_files.assert_awaited_once_with(
        {
            "path": "/",
            "limit": 20,
            "skip": 0,
            "sort": "DESC_CREATED",
            "includeFolder": True,
        }
    )
    assert result.is_error is False
    assert result.text.startswith('Found 1 file(s) in "/":')


@pytest.mark.asyncio
async def test_list_files_with_search_and_type(tools, mock_client):
    mock_client.list_files.return_value = [FileRecord.model_validate(IMAGE_ITEM)]

    result = await tools.list_files(
        ListFilesInput(path="/products", searchQuery='name="shoe.jpg"', fileType="image")
    )

    params = mock_client.list_files.call_args.args[0]
    assert params["searchQuery"] == 'name="shoe.jpg"'
    assert params["fileType"] == "image"
    assert 'matching "name="shoe.jpg""' in result.text


@pytest.mark.asyncio
async def test_list_files_no_results(tools, mock_client):
    mock_client.list_files.return_value = []

    result = await tools.list_files(ListFilesInput(path="/empty", searchQuery="cat"))

    assert result.is_error is False
    assert result.text == 'No files found in "/empty" matching "cat".'


# ---------------------------------------------------------------------------
# list_folders
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_list_folders_filters_out_files(tools, mock_client):
    mock_client.list_files.return_value = [
        FileRecord.model_validate(DOCUMENT_ITEM),
        FolderRecord.model_validate(FOLDER_ITEM),
    ]

    result = await tools.list_folders(ListFoldersInput(path="/photos"))

    mock_client.list_files.assert_awaited_once_with(
        {"path": "/photos", "includeFolder": True, "type": "folder"}
    )
    assert result.text.startswith('Found 1 folder(s) in "/photos":')
    assert "summer" in result.text
    assert "manual.pdf" not in result.text


@pytest.mark.asyncio
async def test_list_folders_empty(tools, mock_client):
    mock_client.list_files.return_value = [FileRecord.model_validate(DOCUMENT_ITEM)]

    result = await tools.list_folders(ListFoldersInput())

    assert result.text == 'No folders found in "/".'


# ---------------------------------------------------------------------------
# get_file_details
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_file_details(tools, mock_client):
    mock_client.get_file_details.return_value = FileRecord.model_validate(IMAGE_ITEM)

    result = await tools.get_file_details(FileIdInput(fileId="img_123"))

    mock_client.get_file_details.assert_awaited_once_with("img_123")
    assert "Created: 2026-02-15T12:00:00.000Z" in result.text


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_upload_file_reads_and_encodes(tools, uploaded, tmp_path):
    source = tmp_path / "hello.txt"
    source.write_bytes(b"hello")

    result = await tools.upload_file(UploadFileInput(filePath=str(source), folder="/notes/"))

    sent = uploaded.upload.call_args.args[0]
    assert sent.file == base64.b64encode(b"hello").decode("ascii")
    assert sent.file_name == "hello.txt"
    assert sent.folder == "/notes"
    assert result.is_error is False


@pytest.mark.asyncio
async def test_upload_file_explicit_name(tools, uploaded, tmp_path):
    source = tmp_path / "hello.txt"
    source.write_bytes(b"hello")

    await tools.upload_file(UploadFileInput(filePath=str(source), fileName="greeting.txt"))

    assert uploaded.upload.call_args.args[0].file_name == "greeting.txt"


@pytest.mark.asyncio
async def test_upload_file_missing_path_never_reaches_gateway(tools, client_provider, mock_client, tmp_path):
    missing = str(tmp_path / "missing.png")

    result = await tools.upload_file(UploadFileInput(filePath=missing))

    assert result.is_error is True
    assert result.text == f"File not found: {missing}"
    client_provider.assert_not_called()
    mock_client.upload.assert_not_called()


@pytest.mark.asyncio
async def test_upload_from_url(tools, uploaded):
    await tools.upload_file_from_url(
        UploadFromUrlInput(url="https://example.com/a.png", fileName="a.png", tags=["x"])
    )

    sent = uploaded.upload.call_args.args[0]
    assert sent.file == "https://example.com/a.png"
    assert sent.tags == ["x"]
    assert sent.use_unique_file_name is True


@pytest.mark.asyncio
async def test_upload_base64_strips_data_uri(tools, uploaded):
    result = await tools.upload_base64_file(
        UploadBase64Input(base64Data="data:text/plain;base64,aGVsbG8=", fileName="hello.txt")
    )

    sent = uploaded.upload.call_args.args[0]
    assert sent.file == "aGVsbG8="
    assert sent.file_name == "hello.txt"
    assert result.is_error is False


@pytest.mark.asyncio
async def test_upload_entry_points_send_equivalent_requests(tools, uploaded, tmp_path):
    source = tmp_path / "hello.txt"
    source.write_bytes(b"hello")
    options = {"folder": "/notes/", "overwriteFile": True, "customMetadata": {"k": 1}}

    await tools.upload_file(UploadFileInput(filePath=str(source), **options))
    await tools.upload_base64_file(
        UploadBase64Input(base64Data="aGVsbG8=", fileName="hello.txt", **options)
    )
    await tools.upload_file_from_url(
        UploadFromUrlInput(url="https://example.com/hello.txt", fileName="hello.txt", **options)
    )

    local, blob, remote = (call.args[0] for call in uploaded.upload.call_args_list)
    assert local.file == blob.file == "aGVsbG8="
    assert local.model_dump(exclude={"file"}) == blob.model_dump(exclude={"file"})
    assert local.model_dump(exclude={"file"}) == remote.model_dump(exclude={"file"})


# ---------------------------------------------------------------------------
# File and folder management
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_delete_file(tools, mock_client):
    result = await tools.delete_file(FileIdInput(fileId="img_123"))

    mock_client.delete_file.assert_awaited_once_with("img_123")
    assert result.text == "File deleted successfully. ID: img_123"


@pytest.mark.asyncio
async def test_create_folder(tools, mock_client):
    result = await tools.create_folder(CreateFolderInput(folderName="summer"))

    mock_client.create_folder.assert_awaited_once_with("summer", "/")
    assert result.text == 'Folder "summer" created in "/".'


@pytest.mark.asyncio
async def test_delete_folder(tools, mock_client):
    result = await tools.delete_folder(DeleteFolderInput(folderPath="/photos/old"))

    mock_client.delete_folder.assert_awaited_once_with("/photos/old")
    assert result.text == "Folder deleted: /photos/old"


@pytest.mark.asyncio
async def test_move_file(tools, mock_client):
    result = await tools.move_file(
        MoveFileInput(sourceFilePath="/a/b.jpg", destinationPath="/c/")
    )

    mock_client.move_file.assert_awaited_once_with("/a/b.jpg", "/c/")
    assert result.text == 'File moved from "/a/b.jpg" to "/c/".'


# ---------------------------------------------------------------------------
# generate_url
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_generate_url_unsigned(tools, mock_client):
    result = await tools.generate_url(
        GenerateUrlInput(path="/a.jpg", transformation=[{"width": 300}], expireSeconds=900)
    )

    options = mock_client.build_url.call_args.args[0]
    assert options.path == "/a.jpg"
    assert options.transformation == [{"width": 300}]
    assert options.transformation_position == "path"
    assert options.signed is False
    assert options.expire_seconds is None
    assert result.text == "Generated URL:\n\n   https://ik.imagekit.io/demo/image.jpg"


@pytest.mark.asyncio
async def test_generate_url_signed_default_expiry(tools, mock_client):
    result = await tools.generate_url(GenerateUrlInput(src="https://cdn.example.com/a.jpg", signed=True))

    options = mock_client.build_url.call_args.args[0]
    assert options.signed is True
    assert options.expire_seconds == 300
    assert options.src == "https://cdn.example.com/a.jpg"
    assert "Signed: yes, expires in 300s" in result.text
