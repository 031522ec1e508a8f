from clip_editor.buffer import ClipboardHistory, TextDocument


def test_recall_defaults_to_latest_entry() -> None:
    history = ClipboardHistory()
    history.push("one")
    history.push("two")

    assert history.recall() == "two"
    assert history.recall(2) == "one"


def test_recall_out_of_range_returns_none() -> None:
    history = ClipboardHistory()
    history.push("only")

    assert history.recall(2) is None
    assert history.recall(0) is None
    assert history.recall(-1) is None


def test_recall_never_removes_entries() -> None:
    history = ClipboardHistory()
    history.push("keep")

    history.recall()
    history.recall()

    assert len(history) == 1
    assert list(history) == ["keep"]


def test_serialize_is_a_detached_snapshot() -> None:
    history = ClipboardHistory()
    history.push("a")
    snapshot = history.serialize()

    history.push("b")

    assert snapshot == ("a",)
    assert history.serialize() == ("a", "b")


def test_document_splice_bumps_version() -> None:
    document = TextDocument("Hello World")

    document.splice(0, 5, "Hi")

    assert document.text == "Hi World"
    assert document.version == 1
    assert len(document) == 8
    assert document.slice(3, 8) == "World"
