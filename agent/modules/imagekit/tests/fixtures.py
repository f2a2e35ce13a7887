"""Sample ImageKit API payloads for module tests."""

from __future__ import annotations

IMAGE_ITEM = {
    "type": "file",
    "fileId": "img_123",
    "name": "shoe.jpg",
    "fileType": "image",
    "size": 20480,
    "width": 800,
    "height": 600,
    "url": "https://ik.imagekit.io/demo/products/shoe.jpg",
    "filePath": "/products/shoe.jpg",
    "tags": ["summer", "sale"],
    "createdAt": "2026-02-15T12:00:00.000Z",
    "updatedAt": "2026-02-16T08:30:00.000Z",
}

DOCUMENT_ITEM = {
    "type": "file",
    "fileId": "doc_456",
    "name": "manual.pdf",
    "fileType": "non-image",
    "size": 1536,
    "url": "https://ik.imagekit.io/demo/docs/manual.pdf",
    "filePath": "/docs/manual.pdf",
    "tags": None,
    "createdAt": "2026-01-10T09:00:00.000Z",
    "updatedAt": "2026-01-10T09:00:00.000Z",
}

FOLDER_ITEM = {
    "type": "folder",
    "folderId": "fld_789",
    "name": "summer",
    "folderPath": "/photos/summer",
    "createdAt": "2026-01-01T00:00:00.000Z",
}

UPLOAD_RESPONSE = {
    "fileId": "up_001",
    "name": "hello_AbC12.txt",
    "size": 5,
    "filePath": "/notes/hello_AbC12.txt",
    "url": "https://ik.imagekit.io/demo/notes/hello_AbC12.txt",
    "fileType": "non-image",
    "height": None,
    "width": None,
    "tags": None,
}

ERROR_NOT_FOUND = {
    "message": "The requested file does not exist.",
    "help": "For support kindly contact us at support@imagekit.io .",
}

CREDENTIALS_ENV = {
    "IMAGEKIT_PUBLIC_KEY": "public_test_key",
    "IMAGEKIT_PRIVATE_KEY": "private_test_key",
    "IMAGEKIT_URL_ENDPOINT": "https://ik.imagekit.io/demo",
}
