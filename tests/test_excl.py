import pytest

from excl import ALWAYS_EXCLUDE, ExclusionMatcher, is_excluded

@pytest.mark.parametrize("path", ALWAYS_EXCLUDE)
def test_builtin_names_always_excluded(path):
    assert is_excluded(path, [])

def test_builtin_names_match_whole_path_only():
    assert not is_excluded("sub/manifest.json", [])
    assert not is_excluded("manifest.json.bak", [])

def test_star_matches_any_run_including_slashes():
    assert is_excluded("b.png", ["*.png"])
    assert is_excluded("textures/blocks/stone.png", ["*.png"])
    assert is_excluded("textures/blocks/stone.png", ["textures/*"])
    assert not is_excluded("a.json", ["*.png"])

def test_question_mark_matches_one_char():
    assert is_excluded("a1.txt", ["a?.txt"])
    assert not is_excluded("a.txt", ["a?.txt"])
    assert not is_excluded("a12.txt", ["a?.txt"])

def test_matching_is_case_sensitive():
    assert not is_excluded("B.PNG", ["*.png"])
    assert not is_excluded("Manifest.json", [])

def test_no_substring_match():
    assert not is_excluded("textures/b.png", ["b.png"])
    assert is_excluded("b.png", ["b.png"])

def test_other_glob_syntax_is_literal():
    assert is_excluded("[a].json", ["[a].json"])
    assert not is_excluded("a.json", ["[a].json"])
    assert not is_excluded("axjson", ["a.json"])

def test_backslashes_are_normalized():
    assert ExclusionMatcher(["textures/*"]).is_excluded("textures\\x.png")
