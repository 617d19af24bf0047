import pytest
from PIL import Image


def _create_image(path):
    img = Image.new("RGB", (16, 16), color=(255, 0, 0))
    img.save(path)


@pytest.fixture
def image_dir(tmp_path):
    """Return a factory that fills tmp_path/photos with real image files."""
    folder = tmp_path / "photos"
    folder.mkdir()

    def make(*names):
        for name in names:
            _create_image(folder / name)
        return folder

    return make
