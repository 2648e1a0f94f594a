import pytest

import pydmini
from pydmini import IniStatus

SAMPLE = (
    "global_key=global_value\n"
    "\n"
    "[section1]\n"
    "key1=value1\n"
    "key2=value2\n"
    "\n"
    "[section2]\n"
    "number=42\n"
)


@pytest.fixture
def ctx():
    ret = pydmini.create()
    yield ret
    pydmini.destroy(ret)


def test_status_values():
    assert IniStatus.OK == 0
    assert IniStatus.GENERAL_ERROR == -1
    assert IniStatus.OUT_OF_MEMORY == -2
    assert IniStatus.INVALID_ARGUMENT == -3
    assert IniStatus.NOT_FOUND == -4
    assert IniStatus.IO_ERROR == -5


def test_end_to_end(ctx):
    assert pydmini.parse_string(ctx, SAMPLE) == IniStatus.OK
    assert pydmini.get_string(ctx, None, 'global_key', '') == 'global_value'
    assert pydmini.get_string(ctx, 'section1', 'key1', '') == 'value1'
    assert pydmini.get_string(ctx, 'section1', 'key2', '') == 'value2'
    assert pydmini.get_string(ctx, 'section2', 'number', '') == '42'
    assert pydmini.get_int(ctx, 'section2', 'number', 0) == 42


def test_set_get(ctx):
    assert pydmini.set_string(ctx, 'database', 'host', 'localhost') == 0
    assert pydmini.get_string(ctx, 'database', 'host', '') == 'localhost'
    assert pydmini.set_int(ctx, 'database', 'port', 5432) == 0
    assert pydmini.get_int(ctx, 'database', 'port', 0) == 5432
    assert pydmini.get_string(ctx, 'database', 'port') == '5432'
    assert pydmini.set_int(ctx, None, 'neg', -7) == 0
    assert pydmini.get_string(ctx, None, 'neg') == '-7'


def test_set_is_idempotent(ctx):
    pydmini.set_string(ctx, 'sec', 'k', 'v')
    once = pydmini.generate_string(ctx)
    pydmini.set_string(ctx, 'sec', 'k', 'v')
    assert pydmini.generate_string(ctx) == once
    assert len(ctx['sec']) == 1
    assert len(ctx) == 1


def test_set_overwrites(ctx):
    pydmini.set_string(ctx, 'sec', 'k', 'a')
    pydmini.set_string(ctx, 'sec', 'k', 'b')
    assert pydmini.get_string(ctx, 'sec', 'k', '') == 'b'
    assert list(ctx['sec']) == ['k']


def test_defaults(ctx):
    assert pydmini.get_string(
        ctx, 'missing_section', 'missing_key', 'fallback') == 'fallback'
    assert pydmini.get_int(ctx, None, 'missing', 7) == 7
    assert pydmini.get_string(None, None, 'k', 'd') == 'd'
    assert pydmini.get_string(ctx, None, None, 'd') == 'd'
    assert pydmini.get_int(None, 's', 'k', 3) == 3


def test_get_int_without_digits_gives_zero(ctx):
    # a present value with no digits decodes to 0, the default is not used.
    pydmini.set_string(ctx, None, 'word', 'abc')
    assert pydmini.get_int(ctx, None, 'word', 99) == 0
    pydmini.set_string(ctx, None, 'mixed', ' -12px')
    assert pydmini.get_int(ctx, None, 'mixed', 99) == -12


def test_has(ctx):
    pydmini.set_string(ctx, 'section1', 'key1', 'value1')
    assert pydmini.has_section(ctx, 'section1')
    assert not pydmini.has_section(ctx, 'section2')
    assert pydmini.has_section(ctx, None)
    assert pydmini.has_key(ctx, 'section1', 'key1')
    assert not pydmini.has_key(ctx, 'section1', 'key2')
    assert not pydmini.has_key(ctx, 'section1', None)
    assert not pydmini.has_section(None, 'section1')
    assert not pydmini.has_key(None, 'section1', 'key1')


def test_remove(ctx):
    pydmini.set_string(ctx, 'section1', 'key1', 'value1')
    pydmini.set_string(ctx, 'section1', 'key2', 'value2')
    assert pydmini.remove_key(ctx, 'section1', 'key1') == IniStatus.OK
    assert not pydmini.has_key(ctx, 'section1', 'key1')
    assert pydmini.has_key(ctx, 'section1', 'key2')
    assert pydmini.remove_section(ctx, 'section1') == IniStatus.OK
    assert not pydmini.has_section(ctx, 'section1')
    assert not pydmini.has_key(ctx, 'section1', 'key2')


def test_remove_misses(ctx):
    pydmini.set_string(ctx, 'sec', 'k', 'v')
    assert pydmini.remove_key(ctx, 'sec', 'nope') == IniStatus.NOT_FOUND
    assert pydmini.remove_key(ctx, 'nope', 'k') == IniStatus.NOT_FOUND
    assert pydmini.remove_section(ctx, 'nope') == IniStatus.NOT_FOUND
    assert pydmini.remove_section(ctx, None) == IniStatus.INVALID_ARGUMENT
    assert pydmini.has_section(ctx, None)


def test_invalid_arguments(ctx):
    invalid = IniStatus.INVALID_ARGUMENT
    assert pydmini.parse_string(None, 'a=1') == invalid
    assert pydmini.parse_string(ctx, None) == invalid
    assert pydmini.parse_file(ctx, None) == invalid
    assert pydmini.set_string(None, 's', 'k', 'v') == invalid
    assert pydmini.set_string(ctx, 's', None, 'v') == invalid
    assert pydmini.set_string(ctx, 's', 'k', None) == invalid
    assert pydmini.set_string(ctx, 's', '', 'v') == invalid
    assert pydmini.set_int(ctx, 's', 'k', 'nan') == invalid
    assert pydmini.remove_key(ctx, 's', None) == invalid
    assert pydmini.generate_file(None, 'x.ini') == invalid
    assert not pydmini.has_section(ctx, 's')


def test_parse_failure_keeps_partial_model(ctx):
    pydmini.set_string(ctx, 'kept', 'k', 'v')
    assert pydmini.parse_string(ctx, b'a=1') == IniStatus.INVALID_ARGUMENT
    assert pydmini.get_string(ctx, 'kept', 'k') == 'v'


def test_generate_string(ctx):
    assert pydmini.generate_string(None) is None
    pydmini.set_string(ctx, None, 'global', 'value')
    pydmini.set_string(ctx, 'section1', 'key1', 'value1')
    text = pydmini.generate_string(ctx)
    assert text == "global=value\n[section1]\nkey1=value1\n"
    assert pydmini.generate_size(ctx) == len(text)


def test_generate_size(ctx):
    pydmini.set_string(ctx, 'sec', 'name', 'ü')
    assert pydmini.generate_size(ctx) == len("[sec]\nname=ü\n")
    assert pydmini.generate_size(ctx, 'utf-8') == len(
        "[sec]\nname=ü\n".encode('utf-8'))
    assert pydmini.generate_size(None) == IniStatus.INVALID_ARGUMENT
    assert pydmini.generate_size(ctx, 'no-such-codec') < 0


def test_round_trip(ctx):
    pydmini.set_string(ctx, None, 'g', '1')
    pydmini.set_string(ctx, 'b', 'x', 'hello world')
    pydmini.set_int(ctx, 'a', 'n', 10)
    pydmini.set_string(ctx, 'b', 'y', '')
    again = pydmini.create()
    assert pydmini.parse_string(
        again, pydmini.generate_string(ctx)) == IniStatus.OK
    assert list(again) == ['b', 'a']
    assert list(again['b'].items()) == [('x', 'hello world'), ('y', '')]
    assert pydmini.get_int(again, 'a', 'n', 0) == 10
    assert pydmini.get_string(again, None, 'g') == '1'


def test_file_io(ctx, tmp_path):
    src = tmp_path / 'test_dmini.ini'
    src.write_text("[section1]\nkey1=value1\n\n[section2]\nkey2=value2\n")
    assert pydmini.parse_file(ctx, src) == IniStatus.OK
    assert pydmini.get_string(ctx, 'section1', 'key1', '') == 'value1'

    out = tmp_path / 'test_dmini_output.ini'
    assert pydmini.generate_file(ctx, out) == IniStatus.OK
    assert out.read_text() == pydmini.generate_string(ctx)


def test_file_errors(ctx, tmp_path):
    missing = tmp_path / 'missing.ini'
    assert pydmini.parse_file(ctx, missing) == IniStatus.IO_ERROR
    assert pydmini.generate_file(ctx, tmp_path) == IniStatus.IO_ERROR


def test_destroy(ctx):
    pydmini.parse_string(ctx, SAMPLE)
    pydmini.destroy(ctx)
    assert len(ctx) == 0
    assert pydmini.generate_string(ctx) == ''
    pydmini.destroy(None)


def test_get_int_on_very_long_value(ctx):
    assert pydmini.parse_string(ctx, 'n=' + '1' * 5000) == IniStatus.OK
    assert pydmini.get_int(ctx, None, 'n', 0) == (10 ** 5000 - 1) // 9
    pydmini.set_string(ctx, 's', 'big', '-' + '2' * 5000)
    assert pydmini.get_int(ctx, 's', 'big', 0) == -2 * (10 ** 5000 - 1) // 9
    assert ctx['s'].getint('big') < 0


def test_getters_with_unhashable_arguments(ctx):
    pydmini.set_string(ctx, 'x', 'k', 'v')
    assert pydmini.get_string(ctx, ['x'], 'k', 'd') == 'd'
    assert pydmini.get_int(ctx, ['x'], 'k', 4) == 4
    assert not pydmini.has_section(ctx, ['x'])
    assert not pydmini.has_key(ctx, ['x'], 'k')
    assert not pydmini.has_key(ctx, 'x', ['k'])
