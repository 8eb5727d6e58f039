"""
Convention Enforcement Tests.

Permanent tests that catch anti-patterns which import-based layer rules
cannot detect: frozen dataclass conventions, immutable collections, silent
exception swallowing, interface contracts, and the project's own design
rules evaluated with archguard itself.
"""

import ast
import inspect
from pathlib import Path

from archguard import (
    LowercaseNamespaceRule,
    NoForbiddenCallsRule,
    NoGenericExceptionsRule,
    RuleEvaluator,
)
from archguard.domain import interfaces
from archguard.domain.interfaces import ModelProviderInterface, RuleInterface
from archguard.infrastructure.model import InMemoryModelProvider, PythonSourceModelProvider
from archguard.rules import (
    ForbiddenNameFragmentRule,
    IndependentSlicesRule,
    MarkerArityRule,
    NamespaceExclusion,
    NoNamespaceDependencyRule,
)

SRC_DIR = Path(__file__).parent.parent.parent / "src"
SRC_ROOT = SRC_DIR / "archguard"


def _frozen_dataclasses(tree: ast.AST) -> list[tuple[ast.ClassDef, bool]]:
    """Return (class_node, is_frozen) for each @dataclass in a module."""
    results = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.ClassDef):
            continue
        for decorator in node.decorator_list:
            if isinstance(decorator, ast.Name) and decorator.id == "dataclass":
                results.append((node, False))
            elif (
                isinstance(decorator, ast.Call)
                and isinstance(decorator.func, ast.Name)
                and decorator.func.id == "dataclass"
            ):
                frozen = any(
                    kw.arg == "frozen"
                    and isinstance(kw.value, ast.Constant)
                    and kw.value.value is True
                    for kw in decorator.keywords
                )
                results.append((node, frozen))
    return results


class TestFrozenDataclassConvention:
    """Domain dataclasses are immutable snapshots."""

    def test_domain_models_are_frozen(self):
        tree = ast.parse((SRC_ROOT / "domain" / "models.py").read_text())
        violations = [node.name for node, frozen in _frozen_dataclasses(tree) if not frozen]

        assert not violations, f"Domain dataclasses must be frozen. Violations: {violations}"

    def test_domain_models_use_tuples_not_lists(self):
        """Frozen domain model fields should use tuple/frozenset, not list/set."""
        source = (SRC_ROOT / "domain" / "models.py").read_text()
        tree = ast.parse(source)
        violations = []

        for node, frozen in _frozen_dataclasses(tree):
            if not frozen:
                continue
            for item in node.body:
                if not isinstance(item, ast.AnnAssign):
                    continue
                annotation = ast.get_source_segment(source, item.annotation) or ""
                if annotation.startswith(("list[", "set[", "dict[")):
                    violations.append(f"{node.name}.{getattr(item.target, 'id', '?')}")

        assert not violations, (
            "Frozen dataclass fields should use immutable collections:\n"
            + "\n".join(f"  - {v}" for v in violations)
        )


class TestNoSilentExceptionSwallowing:
    """No 'except ...: pass' in src/."""

    def test_no_bare_except_pass(self):
        violations = []

        for py_file in SRC_ROOT.rglob("*.py"):
            tree = ast.parse(py_file.read_text())
            for node in ast.walk(tree):
                if not isinstance(node, ast.ExceptHandler):
                    continue
                if node.type is None:
                    violations.append(f"{py_file.name}:{node.lineno}: bare except")
                elif len(node.body) == 1 and isinstance(node.body[0], ast.Pass):
                    violations.append(f"{py_file.name}:{node.lineno}: except ...: pass")

        assert not violations, "Silent exception swallowing found:\n" + "\n".join(
            f"  - {v}" for v in violations
        )


class TestInterfaceConventions:
    """Port naming and contract conventions."""

    def test_all_ports_end_with_interface(self):
        abstract_classes = [
            name
            for name, obj in inspect.getmembers(interfaces, inspect.isclass)
            if inspect.isabstract(obj) and not name.startswith("_")
        ]

        violations = [name for name in abstract_classes if not name.endswith("Interface")]

        assert not violations, f"Abstract classes should end with 'Interface': {violations}"

    def test_all_interface_methods_are_abstract(self):
        violations = []

        for name, cls in inspect.getmembers(interfaces, inspect.isclass):
            if not inspect.isabstract(cls) or not name.endswith("Interface"):
                continue
            for method_name, method in inspect.getmembers(cls, predicate=inspect.isfunction):
                if method_name.startswith("_"):
                    continue
                if not getattr(method, "__isabstractmethod__", False):
                    violations.append(f"{name}.{method_name}")

        assert not violations, f"Public interface methods must be abstract: {violations}"

    def test_rules_satisfy_interface(self):
        """Every built-in rule is concrete and exposes a rule_id."""
        instances = [
            MarkerArityRule("m"),
            NoForbiddenCallsRule(),
            NoGenericExceptionsRule(),
            ForbiddenNameFragmentRule("Interface"),
            LowercaseNamespaceRule(),
            NoNamespaceDependencyRule("..location", "..speakers"),
            IndependentSlicesRule("..tickets"),
            NamespaceExclusion(LowercaseNamespaceRule(), {"a"}),
        ]

        for rule in instances:
            assert isinstance(rule, RuleInterface)
            assert not inspect.isabstract(type(rule))
            assert rule.rule_id

    def test_model_providers_satisfy_interface(self):
        for impl_cls in [InMemoryModelProvider, PythonSourceModelProvider]:
            assert issubclass(impl_cls, ModelProviderInterface)
            assert not inspect.isabstract(impl_cls), impl_cls.__name__


class TestOwnDesignRules:
    """archguard's source holds itself to its own body and naming rules."""

    def test_library_code_follows_design_rules(self):
        rules = [
            NoForbiddenCallsRule(),
            NoGenericExceptionsRule(),
            LowercaseNamespaceRule(),
        ]
        provider = PythonSourceModelProvider(SRC_DIR, package="archguard")

        RuleEvaluator().check(rules, provider).assert_passes()
