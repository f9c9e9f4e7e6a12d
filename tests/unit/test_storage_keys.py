from medingest.storage.keys import build_storage_key


class TestBuildStorageKey:
    def test_composes_user_timestamp_title_and_extension(self) -> None:
        key = build_storage_key("user-7", 1700000000123, "Blood Test Oct", "scan.final.pdf")
        assert key == "user-7/1700000000123-Blood_Test_Oct.pdf"

    def test_collapses_whitespace_runs(self) -> None:
        key = build_storage_key("u", 1, "Blood  \t Test", "a.png")
        assert key == "u/1-Blood_Test.png"

    def test_name_without_dot_uses_whole_name(self) -> None:
        assert build_storage_key("u", 1, "Scan", "README") == "u/1-Scan.README"

    def test_is_deterministic(self) -> None:
        args = ("u", 42, "Report", "r.pdf")
        assert build_storage_key(*args) == build_storage_key(*args)
