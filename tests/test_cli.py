import pytest
from PIL import Image

from asciize import cli
from asciize.font import FontSource
from asciize.output import NBSP


def forbidden(*args, **kwargs):
    raise AssertionError('should not be reached')


@pytest.fixture
def white_image(tmp_path, real_font):
    path = tmp_path / 'white.png'
    # two full rows plus a partial one that gets dropped
    Image.new('L', (80, real_font.line_height * 2 + 3), color=255).save(path)
    return str(path)


class TestUsage:
    def test_bad_score(self, monkeypatch, capsys, white_image):
        monkeypatch.setattr(cli, 'load_image', forbidden)
        monkeypatch.setattr(FontSource, 'load', forbidden)
        assert cli.main(['--score', 'foo', white_image]) == 64
        err = capsys.readouterr().err
        assert 'Bad scoring mode "foo"' in err
        assert 'usage:' in err

    def test_no_image(self, capsys):
        assert cli.main([]) == 64
        assert 'usage:' in capsys.readouterr().err

    def test_two_images(self, white_image):
        assert cli.main([white_image, white_image]) == 64

    def test_bad_size(self, white_image):
        assert cli.main(['--size', 'big', white_image]) == 64
        assert cli.main(['--size', '0', white_image]) == 64

    def test_bad_workers(self, white_image):
        assert cli.main(['--workers', '0', white_image]) == 64


class TestResources:
    def test_missing_image(self, tmp_path, capsys):
        assert cli.main([str(tmp_path / 'missing.png')]) == 66
        assert 'ERROR: Failed to open image' in capsys.readouterr().err

    def test_missing_font(self, tmp_path, white_image):
        assert cli.main(['--font', str(tmp_path / 'missing.ttf'), white_image]) == 66

    def test_undecodable_image(self, tmp_path, capsys):
        path = tmp_path / 'junk.webp'
        path.write_bytes(b'RIFF....garbage')
        assert cli.main([str(path)]) == 66
        assert capsys.readouterr().out == ''


class TestConvert:
    def test_white_image(self, capsys, white_image):
        assert cli.main(['--score', 'shade', white_image]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert all(line and set(line) == {' '} for line in lines)

    def test_trim(self, capsys, white_image):
        assert cli.main(['--trim', white_image]) == 0
        assert capsys.readouterr().out == '\n\n'

    def test_nbsp(self, capsys, white_image):
        assert cli.main(['--nbsp', '--score', 'shade', white_image]) == 0
        out = capsys.readouterr().out
        assert ' ' not in out
        assert NBSP in out

    def test_progress(self, capsys, white_image):
        assert cli.main(['--progress', '--workers', '2', white_image]) == 0
        captured = capsys.readouterr()
        assert 'Progress' in captured.err
        assert '100.00%' in captured.err
        assert len(captured.out.splitlines()) == 2


def test_logger_follows_module():
    assert cli.logger.name == 'asciize.cli'
