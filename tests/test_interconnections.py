from helmkit.data.interconnections import InterConnections


def test_last_write_wins() -> None:
    registry = InterConnections()
    registry.add_connection("RNA1,RNA2,1:pair-4:pair", "pair")
    registry.add_connection("RNA1,RNA2,1:pair-4:pair", "hydrogen bond")
    assert registry.get("RNA1,RNA2,1:pair-4:pair") == "hydrogen bond"
    assert len(registry) == 1


def test_delete_is_idempotent() -> None:
    registry = InterConnections({"a": "b"})
    registry.delete_connection("a")
    registry.delete_connection("a")
    registry.delete_connection("missing")
    assert not registry.has_key("a")
    assert len(registry) == 0


def test_view_is_read_only() -> None:
    source = {"a": "b"}
    registry = InterConnections(source)
    source["c"] = "d"
    assert "c" not in registry
    assert dict(registry.interconnections) == {"a": "b"}
