import pytest

from vlcarchiver.cli import main, pack, packed_file_name, unpack, unpacked_file_name
from vlcarchiver.vlc import UnknownSymbolError


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_packed_file_name():
    assert packed_file_name("some/dir/notes.md") == "notes.vlc"


def test_unpacked_file_name():
    assert unpacked_file_name("some/dir/notes.vlc") == "notes.txt"


def test_file_names_keep_stem():
    assert packed_file_name("a/b/archive.tar.gz").startswith("archive.tar.")
    assert unpacked_file_name("plain").startswith("plain.")


def test_hidden_file_name():
    assert packed_file_name(".profile") == ".vlc"


def test_pack_writes_encoded_text(workdir):
    source = workdir / "sub"
    source.mkdir()
    (source / "story.md").write_text("My name is Ted", encoding="utf-8")
    written = pack(str(source / "story.md"))
    assert written.name == packed_file_name("story.md")
    assert (workdir / written.name).read_text(encoding="utf-8") == "20 30 3C 18 77 4A E4 4D 28"


def test_pack_unpack_round_trip(workdir):
    (workdir / "story.md").write_text("Hello World", encoding="utf-8")
    packed = pack("story.md")
    unpacked = unpack(str(packed))
    assert unpacked.name == unpacked_file_name("story.md")
    assert unpacked.read_text(encoding="utf-8") == "Hello World"


def test_pack_rejects_unknown_symbol(workdir):
    (workdir / "bad.md").write_text("line\n", encoding="utf-8")
    with pytest.raises(UnknownSymbolError):
        pack("bad.md")


def test_main_pack_and_unpack(workdir):
    (workdir / "story.md").write_text("My name is Ted", encoding="utf-8")
    assert main(["pack", "story.md"]) == 0
    assert main(["unpack", packed_file_name("story.md")]) == 0
    result = workdir / unpacked_file_name("story.md")
    assert result.read_text(encoding="utf-8") == "My name is Ted"


def test_main_empty_path(workdir, capsys):
    assert main(["pack", ""]) == 1
    assert "not found a path to file" in capsys.readouterr().err


def test_main_missing_file(workdir, capsys):
    assert main(["unpack", "absent.vlc"]) == 1
    assert "absent.vlc" in capsys.readouterr().err


def test_main_without_command_prints_help(capsys):
    assert main([]) == 0
    assert "pack" in capsys.readouterr().out