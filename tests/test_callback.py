import pytest

from tckit.callback import Function, Operation


def _test_return(ret):
    return ret


def test_return_value_and_reassign():
    f = Function(_test_return)
    assert f(2) == 2
    f.assign(lambda ret: ret + 2)
    assert f(2) == 4


def test_copy_shares_handler():
    calls = []
    f = Function(lambda: calls.append("call"))
    f2 = Function(f)
    f()
    f2()
    assert calls == ["call", "call"]
    assert bool(f2)


def test_assign_function_object():
    f = Function()
    f.assign(Function(_test_return))
    assert f(7) == 7


def test_empty_returns_default():
    assert Function()() is None
    assert Function(default=0)(1, 2) == 0
    assert not Function()


def test_assign_none_empties():
    f = Function(_test_return)
    f.assign(None)
    assert not f
    assert f(5) is None


def test_swap():
    a = Function(_test_return)
    b = Function(lambda x: x * 3)
    a.swap(b)
    assert a(2) == 6
    assert b(2) == 2


def test_swap_rejects_other_types():
    with pytest.raises(TypeError):
        Function().swap(_test_return)


def test_non_callable_rejected():
    with pytest.raises(TypeError):
        Function(42)
    with pytest.raises(TypeError):
        Function().assign("text")


def test_operation_passes_itself():
    seen = []
    op = Operation(seen.append)
    op()
    assert seen == [op]


def test_operation_empty_does_nothing_and_assign():
    seen = []
    op = Operation()
    op()
    assert seen == []
    op.assign(lambda o: seen.append(o))
    op()
    assert seen == [op]


def test_operation_copy_from_other():
    seen = []
    first = Operation(seen.append)
    second = Operation(first)
    second()
    assert seen == [second]


def test_operation_rejects_non_callable():
    with pytest.raises(TypeError):
        Operation(3)