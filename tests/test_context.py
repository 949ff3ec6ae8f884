from __future__ import annotations

import unittest

from ghwrap.core.errors import ContextUnavailable
from ghwrap.discovery.git_context import GitContext, make_git_call

from support import FakeGit, make_context


class GitContextTests(unittest.TestCase):
    def test_owner_and_name_from_origin(self) -> None:
        ctx = make_context(FakeGit(**{"config --get remote.origin.url": "git@github.com:defunkt/hub.git"}))
        self.assertEqual(ctx.repo_owner(), "defunkt")
        self.assertEqual(ctx.repo_name(), "hub")

    def test_https_origin_without_suffix(self) -> None:
        ctx = make_context(FakeGit(**{"config --get remote.origin.url": "https://github.com/a/b"}))
        self.assertEqual((ctx.repo_owner(), ctx.repo_name()), ("a", "b"))

    def test_foreign_host_origin_falls_back_to_dirname(self) -> None:
        ctx = make_context(FakeGit(**{"config --get remote.origin.url": "git@gitlab.com:a/b.git"}), cwd="/src/proj")
        self.assertIsNone(ctx.repo_owner())
        self.assertEqual(ctx.repo_name(), "proj")

    def test_repo_name_outside_repository_raises(self) -> None:
        with self.assertRaises(ContextUnavailable):
            make_context(FakeGit(answers={})).repo_name()

    def test_env_credentials_override_config(self) -> None:
        ctx = make_context(env={"GITHUB_USER": "envuser", "GITHUB_TOKEN": "t"})
        self.assertEqual((ctx.github_user(), ctx.github_token()), ("envuser", "t"))

    def test_remotes_origin_first(self) -> None:
        ctx = make_context(FakeGit(remote="zed\nalpha\norigin"))
        self.assertEqual(ctx.remotes(), ["origin", "alpha", "zed"])

    def test_queries_are_cached(self) -> None:
        git = FakeGit()
        ctx = make_context(git)
        ctx.github_user()
        ctx.github_user()
        ctx.remotes()
        ctx.remotes()
        self.assertEqual(git.calls.count("config --get github.user"), 1)
        self.assertEqual(git.calls.count("remote"), 1)

    def test_tracked_branch_and_repo_user(self) -> None:
        git = FakeGit(**{
            "symbolic-ref -q HEAD": "refs/heads/topic",
            "config --get branch.topic.merge": "refs/heads/topic",
            "config --get branch.topic.remote": "mislav",
            "config --get remote.mislav.url": "git://github.com/mislav/hub.git",
        })
        ctx = make_context(git)
        self.assertEqual(ctx.current_branch(), "topic")
        self.assertEqual(ctx.tracked_branch(), "topic")
        self.assertEqual(ctx.repo_user(), "mislav")

    def test_alias_lookup(self) -> None:
        ctx = make_context(FakeGit(**{"config --get alias.co": "checkout"}))
        self.assertEqual(ctx.git_alias_for("co"), "checkout")
        self.assertIsNone(ctx.git_alias_for("nope"))

    def test_is_repo_and_require(self) -> None:
        self.assertTrue(make_context().is_repo())
        with self.assertRaises(ContextUnavailable):
            make_context(FakeGit(answers={})).require_repo()


class GithubUrlTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ctx = make_context()

    def test_forms(self) -> None:
        self.assertEqual(self.ctx.github_url(repo="a/b"), "git://github.com/a/b.git")
        self.assertEqual(self.ctx.github_url(repo="a/b", private=True), "git@github.com:a/b.git")
        self.assertEqual(self.ctx.github_url(user="x"), "git://github.com/x/hub.git")
        self.assertEqual(self.ctx.github_url(web=""), "https://github.com/tpw/hub")
        self.assertEqual(self.ctx.github_url(user="x", web="/wiki"), "https://github.com/x/hub/wiki")

    def test_custom_host(self) -> None:
        ctx = GitContext(git=FakeGit(), env={}, github_host="git.example.com")
        self.assertEqual(ctx.github_url(repo="a/b"), "git://git.example.com/a/b.git")

    def test_missing_user_is_unavailable(self) -> None:
        ctx = make_context(FakeGit(**{"config --get github.user": None}))
        with self.assertRaises(ContextUnavailable):
            ctx.github_url(repo="tilt")


class MakeGitCallTests(unittest.TestCase):
    def test_missing_binary_yields_none(self) -> None:
        call = make_git_call("/nonexistent/ghwrap-test-git")
        self.assertIsNone(call(["config", "--get", "user.name"]))
