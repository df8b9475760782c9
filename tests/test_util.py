import pytest

from catcodec.util import Utils


@pytest.mark.parametrize("cat_file, expected", [
    ("sample.cat", "sample.sfo"),
    ("pack/sample.cat", "pack/sample.sfo"),
    ("sample.dat", None),
    ("sample", None),
])
def test_sfo_path_for(cat_file, expected):
    assert Utils.sfo_path_for(cat_file) == expected
