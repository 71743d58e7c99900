import pytest

from codespace import Block, BlockConsumedError, CodeBuilder, CodeSpace, IndentPolicy, Text


def test_builder_nesting():
    cb = CodeBuilder(policy=IndentPolicy.spaces(4))
    cb.write("class A:")
    with cb.block():
        assert cb.level == 1
        cb.write("def f(self):")
        with cb.block():
            assert cb.level == 2
            cb.write("return 1")
        cb.write()
        cb.write("x = 2")
    assert cb.level == 0
    assert cb.render() == "class A:\n    def f(self):\n        return 1\n\n    x = 2"


def test_write_empty_is_blank():
    cb = CodeBuilder()
    with cb.block():
        cb.write("")
    assert cb.render() == ""


def test_writelines():
    cb = CodeBuilder()
    with cb.block():
        cb.writelines("a\nb\n\nc")
    assert cb.render() == "  a\n  b\n\n  c"


def test_block_closed_on_error():
    cb = CodeBuilder()
    with pytest.raises(RuntimeError):
        with cb.block() as inner:
            cb.write("partial")
            raise RuntimeError("boom")
    assert cb.level == 0
    assert len(cb.root) == 1
    assert inner.children == (Text("partial"),)
    with pytest.raises(BlockConsumedError):
        inner.insert_line("late")


def test_builder_wraps_given_root():
    root = Block().insert_line("// header")
    cb = CodeBuilder(root=root)
    cb.write("body")
    assert cb.current is root
    assert cb.render() == "// header\nbody"


def test_builder_uses_code_space_settings():
    cb = CodeBuilder(root=CodeSpace(indent_depth=4))
    with cb.block():
        cb.write("flush")
        with cb.block():
            assert cb.level == 2
            cb.write("x")
    assert cb.render() == "flush\n    x"
    assert cb.render() == cb.root.render()


def test_builder_explicit_policy_overrides_code_space():
    cb = CodeBuilder(policy=IndentPolicy.tabs(), root=CodeSpace(indent_depth=4))
    with cb.block():
        with cb.block():
            cb.write("x")
    assert cb.render() == "\tx"
