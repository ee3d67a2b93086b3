from PIL import Image

from main import main


def test_cli_renders_png(tmp_path):
    output = tmp_path / "out.png"
    code = main(["--width", "6", "--height", "4", "--max-depth", "2", "--probes", "1",
                 "--scene", "simple", "--seed", "3", "--output", str(output)])
    assert code == 0
    with Image.open(output) as image:
        assert image.size == (6, 4)
        assert image.mode == "RGBA"


def test_cli_applies_zoom(tmp_path):
    output = tmp_path / "zoomed.png"
    assert main(["--width", "8", "--height", "8", "--zoom", "2", "--max-depth", "1",
                 "--seed", "1", "--output", str(output)]) == 0
    with Image.open(output) as image:
        assert image.size == (4, 4)


def test_cli_rejects_invalid_options(tmp_path):
    output = tmp_path / "bad.png"
    assert main(["--avg-mixer", "2", "--output", str(output)]) == 2
    assert not output.exists()
