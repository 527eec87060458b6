import pytest

from vlcarchiver.decoding_tree import DecodingTree

TABLE = {"a": "11", "b": "1001", "z": "0101"}


def test_from_table_builds_expected_tree():
    expected = DecodingTree(
        zero=DecodingTree(
            one=DecodingTree(
                zero=DecodingTree(
                    one=DecodingTree(value="z"),
                ),
            ),
        ),
        one=DecodingTree(
            zero=DecodingTree(
                zero=DecodingTree(
                    one=DecodingTree(value="b"),
                ),
            ),
            one=DecodingTree(value="a"),
        ),
    )
    assert DecodingTree.from_table(TABLE) == expected


def test_add_creates_path():
    tree = DecodingTree()
    tree.add("10", "x")
    assert tree.one is not None
    assert tree.one.zero == DecodingTree(value="x")
    assert tree.zero is None


def test_decode_sequence():
    tree = DecodingTree.from_table(TABLE)
    assert tree.decode("11" + "1001" + "0101" + "11") == "abza"


def test_decode_drops_unfinished_code():
    tree = DecodingTree.from_table(TABLE)
    assert tree.decode("11" + "10") == "a"


def test_decode_empty():
    assert DecodingTree.from_table(TABLE).decode("") == ""


def test_decode_rejects_unknown_path():
    tree = DecodingTree.from_table(TABLE)
    with pytest.raises(ValueError):
        tree.decode("00")