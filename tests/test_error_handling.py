"""
Tests for fatal errors and error policies during searches.
"""

import os

import pytest

from glomplib import (
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
    ExpectedDirectoryError,
    FailFastPolicy,
    GlompError,
    InvalidRootError,
    SearchConfig,
    glomp,
)
from glomplib.testing import make_relative


@pytest.fixture
def broken_link_tree(fixtures_dir):
    """Fixture tree plus a dangling symlink in dir-2."""
    os.symlink(fixtures_dir / "does-not-exist", fixtures_dir / "dir-2" / "dangling.txt")
    return fixtures_dir


@pytest.fixture
def unlistable_dir_2(monkeypatch):
    """Make listing any directory named dir-2 fail with PermissionError."""
    real_listdir = os.listdir

    def listdir(path):
        if os.fspath(path).endswith("dir-2"):
            raise PermissionError(13, "Permission denied", path)
        return real_listdir(path)

    monkeypatch.setattr(os, "listdir", listdir)


class TestFatalErrors:
    """Errors that always reach the caller."""

    def test_relative_root_sync(self):
        with pytest.raises(InvalidRootError) as exc_info:
            glomp().find_matches_sync("relative/dir")
        assert "relative/dir" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_relative_root_async(self):
        with pytest.raises(InvalidRootError):
            await glomp().find_matches("relative/dir")

    def test_invalid_root_is_value_error(self):
        assert issubclass(InvalidRootError, ValueError)
        assert issubclass(InvalidRootError, GlompError)

    def test_root_is_file_sync(self, fixtures_dir):
        root = str(fixtures_dir / "hello.txt")
        with pytest.raises(ExpectedDirectoryError) as exc_info:
            glomp().find_matches_sync(root)
        assert exc_info.value.path == root
        assert "Expected path to be a directory" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_root_is_file_async(self, fixtures_dir):
        with pytest.raises(ExpectedDirectoryError):
            await glomp().find_matches(str(fixtures_dir / "hello.txt"))

    @pytest.mark.asyncio
    async def test_fatal_errors_bypass_lenient_policy(self, fixtures_dir):
        policy = CollectErrorsPolicy()
        g = glomp().with_config(SearchConfig(error_policy=policy))
        with pytest.raises(ExpectedDirectoryError):
            await g.find_matches(str(fixtures_dir / "blah.h"))
        assert policy.errors == []


class TestLenientSearch:
    """Filesystem errors skip the affected path by default."""

    @pytest.mark.asyncio
    async def test_missing_root_returns_nothing(self, tmp_path):
        missing = str(tmp_path / "missing")
        assert glomp().find_matches_sync(missing) == []
        assert await glomp().find_matches(missing) == []

    @pytest.mark.asyncio
    async def test_dangling_symlink_is_skipped(self, broken_link_tree):
        g = glomp().within_dir("dir-2")
        results = g.find_matches_sync(str(broken_link_tree))
        assert await g.find_matches(str(broken_link_tree)) == results
        assert make_relative(results, broken_link_tree) == [
            "dir-2/foof.txt",
            "dir-2/potato.d.ts",
        ]

    @pytest.mark.asyncio
    async def test_unlistable_directory_is_skipped(self, fixtures_dir, unlistable_dir_2):
        results = glomp().find_matches_sync(str(fixtures_dir))
        assert await glomp().find_matches(str(fixtures_dir)) == results
        assert make_relative(results, fixtures_dir) == [
            "blah.h",
            "hello.txt",
            "dir-1/fox.ts",
            "dir-1/dir-b/smiley.cfg",
        ]

    def test_collect_errors_policy_records_skips(self, broken_link_tree):
        policy = CollectErrorsPolicy()
        glomp().with_config(SearchConfig(error_policy=policy)).find_matches_sync(
            str(broken_link_tree)
        )
        assert len(policy.errors) == 1
        error = policy.errors[0]
        assert error['operation'] == 'stat_entry'
        assert error['error_type'] == 'FileNotFoundError'
        assert error['path'] == str(broken_link_tree / "dir-2" / "dangling.txt")
        assert policy.get_statistics()['not_found_errors'] == 1

    @pytest.mark.asyncio
    async def test_collect_errors_policy_async_list_dir(self, fixtures_dir, unlistable_dir_2):
        policy = CollectErrorsPolicy()
        g = glomp().with_config(SearchConfig(error_policy=policy))
        await g.find_matches(str(fixtures_dir))
        assert sorted(e['operation'] for e in policy.errors) == ['list_dir', 'list_dir']
        assert policy.get_statistics()['permission_errors'] == 2

    @pytest.mark.asyncio
    async def test_default_policy_keeps_no_state_between_searches(
        self, broken_link_tree, monkeypatch
    ):
        policies = []
        real_resolve = SearchConfig.resolved_error_policy

        def resolve(config):
            policy = real_resolve(config)
            policies.append(policy)
            return policy

        monkeypatch.setattr(SearchConfig, "resolved_error_policy", resolve)

        base = glomp(str(broken_link_tree))
        txt = base.with_extension("txt")
        no_dir_1 = base.exclude_dir("dir-1")
        for _ in range(5):
            for g in (base, txt, no_dir_1):
                sync_results = g.find_matches_sync()
                assert await g.find_matches(concurrency=2) == sync_results
        assert make_relative(txt.find_matches_sync(), broken_link_tree) == [
            "hello.txt",
            "dir-2/foof.txt",
        ]

        assert base.config.error_policy is None
        assert txt.config is base.config
        assert len(policies) == 31
        assert len({id(policy) for policy in policies}) == 31
        # Each search saw the dangling symlink once, and only its own copy
        for policy in policies:
            assert isinstance(policy, ContinueOnErrorsPolicy)
            assert len(policy.errors) == 1
            assert policy.skipped_paths == [
                str(broken_link_tree / "dir-2" / "dangling.txt")
            ]

    def test_quiet_by_default(self, broken_link_tree, capsys):
        glomp().find_matches_sync(str(broken_link_tree))
        assert capsys.readouterr().err == ""

    def test_verbose_policy_warns_on_stderr(self, fixtures_dir, unlistable_dir_2, capsys):
        g = glomp().with_config(SearchConfig.lenient(verbose=True))
        g.find_matches_sync(str(fixtures_dir))
        err = capsys.readouterr().err
        assert "WARNING: Skipping inaccessible path" in err
        assert str(fixtures_dir / "dir-2") in err


class TestStrictSearch:
    """FailFastPolicy turns filesystem errors into exceptions."""

    def test_dangling_symlink_raises_sync(self, broken_link_tree):
        g = glomp().with_config(SearchConfig.strict())
        with pytest.raises(FileNotFoundError):
            g.find_matches_sync(str(broken_link_tree))

    @pytest.mark.asyncio
    async def test_unlistable_directory_raises_async(self, fixtures_dir, unlistable_dir_2):
        g = glomp().with_config(SearchConfig(error_policy=FailFastPolicy()))
        with pytest.raises(PermissionError):
            await g.find_matches(str(fixtures_dir), concurrency=2)


class TestPolicies:
    """Policy objects in isolation."""

    def test_fail_fast_reraises(self):
        with pytest.raises(PermissionError):
            FailFastPolicy().handle(PermissionError("denied"), 'list_dir', '/x')

    def test_continue_on_errors_records(self):
        policy = ContinueOnErrorsPolicy()
        assert policy.handle(OSError("gone"), 'stat_dir', '/x') is None
        assert policy.skipped_paths == ['/x']
        assert policy.verbose is False

    def test_continue_on_errors_verbose_message(self, capsys):
        ContinueOnErrorsPolicy(verbose=True).handle(OSError("gone"), 'stat_entry', '/x/y')
        assert "WARNING: Error in stat_entry for '/x/y': gone" in capsys.readouterr().err
