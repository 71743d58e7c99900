from codespace import Block, CodeBuilder, IndentPolicy, validate_python


def test_valid_python_block():
    body = Block().insert_line('"""Add one."""').insert_line("return x + 1")
    module = Block().insert_line("import math").insert_new_line().insert_scope(
        "def inc(x: int) -> int", body, opener=":", closer=None
    )
    res = validate_python(module, IndentPolicy.spaces(4))
    assert res.ok, res.errors
    assert res.errors == []


def test_builder_output_validates():
    cb = CodeBuilder()
    cb.write("for i in range(3):")
    with cb.block():
        cb.write("if i:")
        with cb.block():
            cb.write("print(i)")
    assert validate_python(cb.render()).ok


def test_missing_indentation_fails():
    src = Block().insert_line("def f():").insert_line("return 1").render()
    res = validate_python(src)
    assert not res.ok
    assert res.errors[0].startswith("LibCST parse error")


def test_empty_source_is_valid():
    assert validate_python("").ok
    assert validate_python(Block()).ok
