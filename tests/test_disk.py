import pytest

from sysinfobrowser.disk import disks, size


@pytest.fixture
def block_dir(tmp_path):
    for name in ("sda", "zram0", "nvme0n1"):
        (tmp_path / name).mkdir()
    return tmp_path


def test_disks_are_sorted_and_skip_zram(block_dir):
    assert disks(block_dir) == ["nvme0n1", "sda"]


def test_disks_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        disks(tmp_path / "absent")


def test_size_converts_sectors_to_gigabytes(block_dir):
    (block_dir / "sda" / "size").write_text("3906250\n")
    assert size("sda", block_dir) == 2


def test_size_rounds_down(block_dir):
    (block_dir / "sda" / "size").write_text("1953124\n")
    assert size("sda", block_dir) == 0


def test_size_not_a_number(block_dir):
    (block_dir / "sda" / "size").write_text("lots\n")
    with pytest.raises(ValueError):
        size("sda", block_dir)


def test_size_missing_file(block_dir):
    with pytest.raises(FileNotFoundError):
        size("nvme0n1", block_dir)