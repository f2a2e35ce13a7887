"""Tests for result rendering."""

from __future__ import annotations

from modules.imagekit.formatting import (
    format_error,
    format_file_details,
    format_file_info,
    format_file_list,
    format_folder_list,
    format_generated_url,
    format_result,
    format_size_kb,
    format_upload_result,
)
from modules.imagekit.models import FileRecord, FolderRecord
from modules.imagekit.tests.fixtures import DOCUMENT_ITEM, FOLDER_ITEM, IMAGE_ITEM


def test_format_result_and_error():
    ok = format_result("done")
    err = format_error("boom")

    assert ok.is_error is False
    assert ok.content[0].text == "done"
    assert err.is_error is True
    assert err.content[0].text == "boom"
    assert err.model_dump(by_alias=True)["isError"] is True


def test_format_size_kb():
    assert format_size_kb(20480) == "20.0 KB"
    assert format_size_kb(1536) == "1.5 KB"
    assert format_size_kb(None) == "N/A"


def test_format_file_info_image():
    text = format_file_info(FileRecord.model_validate(IMAGE_ITEM))

    assert text == (
        "shoe.jpg (image, 20.0 KB, 800x600)\n"
        "   Tags: summer, sale\n"
        "   ID: img_123\n"
        "   URL: https://ik.imagekit.io/demo/products/shoe.jpg"
    )


def test_format_file_info_without_dims_or_tags():
    text = format_file_info(FileRecord.model_validate(DOCUMENT_ITEM))

    assert text.startswith("manual.pdf (non-image, 1.5 KB)\n")
    assert "Tags" not in text


def test_format_file_info_defaults():
    record = FileRecord(fileId="f1", name="blob")

    assert format_file_info(record).startswith("blob (file, N/A)")


def test_format_file_info_needs_both_dimensions():
    record = FileRecord(fileId="f1", name="half.png", fileType="image", size=1024, width=100)

    assert format_file_info(record).startswith("half.png (image, 1.0 KB)")


def test_format_file_list_empty():
    assert format_file_list([], "/photos") == 'No files found in "/photos".'
    assert (
        format_file_list([], "/photos", "cat")
        == 'No files found in "/photos" matching "cat".'
    )


def test_format_file_list_with_entries():
    entries = [
        FileRecord.model_validate(IMAGE_ITEM),
        FolderRecord.model_validate(FOLDER_ITEM),
    ]

    text = format_file_list(entries, "/", "shoe")

    assert text.startswith('Found 2 file(s) matching "shoe" in "/":\n\n')
    assert "shoe.jpg (image" in text
    assert "summer\n   ID: fld_789\n   Path: /photos/summer" in text
    # Entries separated by a blank line
    assert "\n\nsummer" in text


def test_format_folder_list():
    folders = [FolderRecord.model_validate(FOLDER_ITEM)]

    assert format_folder_list([], "/x") == 'No folders found in "/x".'
    assert format_folder_list(folders, "/photos") == (
        'Found 1 folder(s) in "/photos":\n\n'
        "summer\n   ID: fld_789\n   Path: /photos/summer"
    )


def test_format_file_details():
    text = format_file_details(FileRecord.model_validate(IMAGE_ITEM))

    assert text.startswith("File details:\n\n   Name: shoe.jpg\n")
    assert "   Dimensions: 800x600" in text
    assert "   Tags: summer, sale" in text
    assert "   Created: 2026-02-15T12:00:00.000Z" in text
    assert text.endswith("   Updated: 2026-02-16T08:30:00.000Z")


def test_format_generated_url():
    assert format_generated_url("https://x/y", signed=False) == "Generated URL:\n\n   https://x/y"
    assert format_generated_url("https://x/y", signed=True, expire_seconds=300).endswith(
        "\n\n   Signed: yes, expires in 300s"
    )


def test_format_upload_result_without_file_type():
    record = FileRecord(fileId="up_002", name="blob.bin", size=2048, url="https://x/blob.bin")

    text = format_upload_result(record)

    assert text.endswith("   Type: file")
