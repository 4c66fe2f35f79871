import typosmith


def test_get_version_matches_public_api() -> None:
    assert typosmith.get_version() == typosmith.__version__
    assert isinstance(typosmith.__version__, str)
