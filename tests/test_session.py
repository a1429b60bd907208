import pytest

from hexgrid.core.session import Session


def test_title_tracks_file_and_modified(tmp_path):
    session = Session()
    assert session.title() == "Hex Editor"

    path = tmp_path / "data.bin"
    path.write_bytes(b"\x01\x02\x03")
    session.load_file(str(path))
    assert session.title() == f"Hex Editor - {path}"

    session.mark_modified()
    assert session.title() == f"Hex Editor - {path} *"


def test_load_replaces_buffer_and_resets_state(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\xDE\xAD")

    session = Session(b"old contents")
    session.modified = True
    session.caret_offset = 7
    session.top_line = 3
    session.load_file(str(path))

    assert session.data == bytearray(b"\xDE\xAD")
    assert isinstance(session.data, bytearray)
    assert session.get_size() == 2
    assert not session.modified
    assert (session.caret_offset, session.top_line) == (0, 0)


def test_save_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x01")

    session = Session()
    session.load_file(str(path))
    session.data[1] = 0xFF
    session.mark_modified()
    assert session.save_file()

    assert path.read_bytes() == b"\x00\xFF"
    assert not session.modified


def test_save_as(tmp_path):
    session = Session(b"abc")
    target = tmp_path / "out.bin"
    assert session.save_file(str(target))
    assert target.read_bytes() == b"abc"
    assert session.filename == str(target)


def test_save_without_filename():
    assert Session(b"abc").save_file() is False


def test_save_failure_raises_ioerror(tmp_path):
    session = Session(b"abc")
    with pytest.raises(IOError):
        session.save_file(str(tmp_path / "missing" / "out.bin"))


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        Session().load_file(str(tmp_path / "nope.bin"))
