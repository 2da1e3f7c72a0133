import pytest

from rabbik.node_path import NodePath


def test_empty_path_has_no_names():
    path = NodePath()
    assert path.name_count == 0
    assert path.subname_count == 0
    assert path.is_absolute is False


def test_empty_path_name_lookup_raises():
    with pytest.raises(IndexError):
        NodePath("").name(0)
    with pytest.raises(IndexError):
        NodePath("").subname(0)


def test_relative_names():
    path = NodePath("a/b/c")
    assert path.name_count == 3
    assert [path.name(i) for i in range(path.name_count)] == ["a", "b", "c"]
    assert path.is_absolute is False


def test_absolute_path():
    path = NodePath("/root/player")
    assert path.is_absolute is True
    assert path.names == ("root", "player")


def test_subnames():
    path = NodePath("a/b:position:x")
    assert path.names == ("a", "b")
    assert path.subname_count == 2
    assert path.subname(0) == "position"
    assert path.subname(1) == "x"


def test_negative_index_raises():
    with pytest.raises(IndexError):
        NodePath("a").name(-1)


def test_round_trip_through_str():
    text = "/root/a:b:c"
    assert str(NodePath(text)) == text
    assert NodePath(str(NodePath(text))) == NodePath(text)