import pytest

from quadkit.shaders import PreprocessorConfig, preprocess_shader


def test_preprocessor_source_case():
    shader_string = """
#version blah blah

asd
asd

#include "hello.glsl"

qwe
"""
    preprocessed = """
#version blah blah

asd
asd

iii
jjj

qwe
"""
    result = preprocess_shader(
        shader_string,
        PreprocessorConfig(includes=[("hello.glsl", "iii\njjj")]),
    )
    assert result == preprocessed


def test_source_without_includes_is_unchanged():
    source = "void main() {}\n"
    assert preprocess_shader(source, PreprocessorConfig()) == source


def test_multiple_includes_expand_in_order():
    config = PreprocessorConfig(includes=[("a", "AAA"), ("b", "BBB")])
    result = preprocess_shader('#include "a"\n#include  "b"\n', config)
    assert result == "AAA\nBBB\n"


def test_missing_include_raises():
    with pytest.raises(ValueError, match="other.glsl"):
        preprocess_shader('#include "other.glsl"', PreprocessorConfig())


def test_missing_quote_raises():
    with pytest.raises(ValueError):
        preprocess_shader("#include hello", PreprocessorConfig())


def test_unterminated_name_raises():
    config = PreprocessorConfig(includes=[("x", "y")])
    with pytest.raises(ValueError):
        preprocess_shader('#include "x', config)