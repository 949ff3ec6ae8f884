from __future__ import annotations

import unittest
from types import MappingProxyType

from ghwrap.commands.registry import build_rule_set
from ghwrap.commands.resolver import Resolver, normalize
from ghwrap.core.args import ArgumentList
from ghwrap.core.errors import CommandAbort, ContextUnavailable

from support import FakeGit, make_env


def _resolver(**git_answers):
    env, _ = make_env(FakeGit(**git_answers))
    return Resolver(build_rule_set(), env)


class NormalizeTests(unittest.TestCase):
    def test_first_compound_only(self) -> None:
        self.assertEqual(normalize("cherry-pick"), "cherry_pick")
        self.assertEqual(normalize("a-b-c"), "a_b-c")

    def test_flags_and_plain_names_unchanged(self) -> None:
        for name in ("--version", "--help", "status", "clone"):
            self.assertEqual(normalize(name), name)


class ResolveTests(unittest.TestCase):
    def test_only_flags_fall_back_to_help(self) -> None:
        res = _resolver().resolve(["--bare", "-p"])
        self.assertEqual(res.command, "help")
        self.assertEqual(res.tokens, ["help", "--bare", "-p"])

    def test_empty_argv_is_help(self) -> None:
        res = _resolver().resolve([])
        self.assertEqual((res.command, res.tokens), ("help", ["help"]))

    def test_noop_flags_are_commands(self) -> None:
        self.assertEqual(_resolver().resolve(["--version"]).command, "--version")
        res = _resolver().resolve(["--exec-path"])
        self.assertEqual(res.tokens, ["--exec-path"])
        self.assertIsNone(res.rule)

    def test_unknown_command_passes_through(self) -> None:
        raw = ["nonsense-command", "--flag", "x"]
        res = _resolver().resolve(raw)
        self.assertIsNone(res.rule)
        self.assertEqual(res.tokens, raw)
        self.assertEqual(res.command, "nonsense_command")

    def test_alias_resolves_command_name(self) -> None:
        res = _resolver(**{"config --get alias.co": "checkout"}).resolve(["co"])
        self.assertEqual(res.command, "checkout")
        self.assertIsNone(res.rule)
        # no rule for checkout: git receives the alias untouched
        self.assertEqual(res.tokens, ["co"])

    def test_alias_expansion_substituted_when_rule_matches(self) -> None:
        res = _resolver(**{"config --get alias.cl": "clone --depth '1'"}).resolve(["cl", "a/b"])
        self.assertEqual(res.command, "clone")
        self.assertEqual(res.tokens, ["clone", "--depth", "1", "a/b"])
        self.assertIsNotNone(res.rule)

    def test_shell_alias_not_expanded(self) -> None:
        res = _resolver(**{"config --get alias.pu": "!git push origin"}).resolve(["pu"])
        self.assertEqual(res.command, "pu")
        self.assertEqual(res.tokens, ["pu"])

    def test_hyphenated_alias_target_normalized(self) -> None:
        res = _resolver(**{"config --get alias.cp": "cherry-pick -x"}).resolve(["cp", "a@1234567"])
        self.assertEqual(res.command, "cherry_pick")
        self.assertEqual(res.tokens, ["cherry-pick", "-x", "a@1234567"])

    def test_resolving_normalized_name_is_idempotent(self) -> None:
        resolver = _resolver()
        first = resolver.resolve(["status"])
        second = resolver.resolve([first.command])
        self.assertEqual(first.command, second.command)
        self.assertEqual(second.tokens, ["status"])


class DispatchTests(unittest.TestCase):
    def test_rule_gets_argument_list(self) -> None:
        seen = []
        env, _ = make_env()
        rules = MappingProxyType({"status": lambda args, e: seen.append((list(args), e))})
        args = ArgumentList(["status", "-s"])
        self.assertTrue(Resolver(rules, env).dispatch(args))
        self.assertEqual(seen, [(["status", "-s"], env)])

    def test_no_rule_leaves_tokens_alone(self) -> None:
        env, _ = make_env(FakeGit(**{"config --get alias.st": "status -sb"}))
        args = ArgumentList(["st"])
        self.assertFalse(Resolver(MappingProxyType({}), env).dispatch(args))
        self.assertEqual(args.tokens, ["st"])
        self.assertFalse(args.needs_supervision())

    def test_context_unavailable_becomes_abort(self) -> None:
        def rule(args, env):
            raise ContextUnavailable("Not a git repository")

        env, _ = make_env()
        with self.assertRaises(CommandAbort) as cm:
            Resolver(MappingProxyType({"browse": rule}), env).dispatch(ArgumentList(["browse"]))
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("Not a git repository", cm.exception.message)

    def test_rule_set_is_read_only(self) -> None:
        rules = build_rule_set()
        with self.assertRaises(TypeError):
            rules["status"] = lambda a, e: None  # type: ignore[index]
        for name in ("clone", "fetch", "push", "cherry_pick", "help", "--help", "--version"):
            self.assertIn(name, rules)


if __name__ == "__main__":
    unittest.main()
