"""
Python source structural model.

Pure AST-based provider: reads ``*.py`` files under a source root and turns
classes, functions and methods into declarations. Does NOT import or execute
the analysed code.
"""

import ast
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import NamedTuple

from archguard.domain.exceptions import ModelLoadError
from archguard.domain.interfaces import ModelProviderInterface
from archguard.domain.models import Declaration, DeclarationKind

logger = logging.getLogger("archguard.model")

DEFAULT_EXCLUDE_DIRS = (
    ".git",
    ".venv",
    "venv",
    "__pycache__",
    "node_modules",
    "build",
    "dist",
    ".mypy_cache",
    ".pytest_cache",
)

FunctionNode = ast.FunctionDef | ast.AsyncFunctionDef


def dotted_name(node: ast.AST) -> str | None:
    """Dotted name of a Name/Attribute chain, ``None`` for anything else."""
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        base = dotted_name(node.value)
        return f"{base}.{node.attr}" if base else None
    return None


def decorator_markers(decorators: list[ast.expr]) -> frozenset[str]:
    """
    Marker names for a decorator list.

    ``@pkg.marker(...)`` yields both ``pkg.marker`` and ``marker`` so rules
    can select by either spelling.
    """
    markers: set[str] = set()
    for decorator in decorators:
        target = decorator.func if isinstance(decorator, ast.Call) else decorator
        name = dotted_name(target)
        if name:
            markers.add(name)
            markers.add(name.rsplit(".", 1)[-1])
    return frozenset(markers)


def count_parameters(node: FunctionNode, is_method: bool) -> int:
    """All declared parameters minus the implicit receiver of methods."""
    args = node.args
    count = len(args.posonlyargs) + len(args.args) + len(args.kwonlyargs)
    count += int(args.vararg is not None) + int(args.kwarg is not None)

    if is_method and "staticmethod" not in decorator_markers(node.decorator_list):
        if args.posonlyargs or args.args:
            count -= 1  # self / cls
    return count


NESTED_SCOPES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)


class BodyFacts(NamedTuple):
    """Facts collected from one scope's statements."""

    calls: frozenset[str]
    raises: frozenset[str]
    imports: frozenset[str]


def _walk_statements(body: list[ast.stmt]) -> Iterator[ast.AST]:
    """Walk statements without entering nested functions or classes."""
    stack: list[ast.AST] = [*body]
    while stack:
        current = stack.pop()
        if isinstance(current, NESTED_SCOPES):
            continue  # Nested scope: its facts belong to its own declaration
        yield current
        stack.extend(ast.iter_child_nodes(current))


def import_targets(node: ast.Import | ast.ImportFrom, package: tuple[str, ...]) -> set[str]:
    """
    Dotted names an import statement depends on.

    ``from .speakers import Speaker`` inside package ``conference.location``
    yields ``conference.location.speakers.Speaker``. Relative imports that
    climb above the source root resolve against what is left.
    """
    if isinstance(node, ast.Import):
        return {alias.name for alias in node.names}

    base: tuple[str, ...] = ()
    if node.level:
        base = package[: max(len(package) - (node.level - 1), 0)]
    module = ".".join((*base, *(node.module.split(".") if node.module else ())))
    targets = set()
    for alias in node.names:
        if alias.name == "*" or not module:
            targets.add(module or alias.name)
        else:
            targets.add(f"{module}.{alias.name}")
    return targets


def collect_body_facts(body: list[ast.stmt], package: tuple[str, ...] = ()) -> BodyFacts:
    """Return calls, raised exception types and imports for a scope."""
    calls: set[str] = set()
    raises: set[str] = set()
    imports: set[str] = set()
    for child in _walk_statements(body):
        if isinstance(child, ast.Call):
            name = dotted_name(child.func)
            if name:
                calls.add(name)
        elif isinstance(child, ast.Raise) and child.exc is not None:
            exc = child.exc.func if isinstance(child.exc, ast.Call) else child.exc
            name = dotted_name(exc)
            if name:
                raises.add(name)
        elif isinstance(child, ast.Import | ast.ImportFrom):
            imports.update(import_targets(child, package))
    return BodyFacts(frozenset(calls), frozenset(raises), frozenset(imports))


class PythonSourceModelProvider(ModelProviderInterface):
    """
    Structural model of a Python code base read with the ``ast`` module.

    Namespace path is the module path relative to the source root (package
    segments plus the module name; ``__init__`` is dropped). Declarations
    are ordered by file path, then by source position.

    Imports at module level are attached to the module's top-level classes
    and functions; imports inside a function body to that function only.

    Example:
        provider = PythonSourceModelProvider("src", package="conference")
        declarations = provider.declarations()
    """

    def __init__(
        self,
        source_root: str | Path,
        package: str | None = None,
        exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    ):
        """
        Args:
            source_root: Directory module paths are resolved against
            package: Optional dotted package to restrict the scan to
            exclude_dirs: Directory names never descended into
        """
        self.source_root = Path(source_root)
        self.package = package
        self.exclude_dirs = frozenset(exclude_dirs)

    def declarations(self) -> tuple[Declaration, ...]:
        scan_root = self.source_root
        if self.package:
            scan_root = scan_root.joinpath(*self.package.split("."))
        if not scan_root.is_dir():
            raise ModelLoadError(str(scan_root), "not a directory")

        result: list[Declaration] = []
        for path in self._iter_source_files(scan_root):
            found = self._load_file(path)
            logger.debug("Loaded %d declaration(s) from %s", len(found), path)
            result.extend(found)

        logger.info("Structural model: %d declaration(s) under %s", len(result), scan_root)
        return tuple(result)

    def _iter_source_files(self, scan_root: Path) -> list[Path]:
        files = []
        for path in scan_root.rglob("*.py"):
            relative = path.relative_to(self.source_root)
            if any(part in self.exclude_dirs for part in relative.parts[:-1]):
                continue
            files.append(path)
        return sorted(files)

    def _module_path(self, path: Path) -> tuple[str, ...]:
        parts = path.relative_to(self.source_root).with_suffix("").parts
        if parts and parts[-1] == "__init__":
            parts = parts[:-1]
        return tuple(parts)

    def _load_file(self, path: Path) -> list[Declaration]:
        try:
            source = path.read_text(encoding="utf-8")
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ModelLoadError(str(path), f"syntax error: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ModelLoadError(str(path), str(e)) from e

        module_path = self._module_path(path)
        package = module_path if path.name == "__init__.py" else module_path[:-1]
        module_imports = collect_body_facts(tree.body, package).imports
        scope = _Scope(
            namespace_path=module_path,
            qualifier=module_path,
            package=package,
            location=path.relative_to(self.source_root).as_posix(),
            in_class=False,
            imports=module_imports,
        )
        return list(self._visit_scope(tree.body, scope))

    def _visit_scope(self, body: list[ast.stmt], scope: "_Scope") -> Iterator[Declaration]:
        for node in body:
            if isinstance(node, ast.ClassDef):
                class_qualifier = (*scope.qualifier, node.name)
                yield Declaration(
                    name=".".join(class_qualifier),
                    namespace_path=scope.namespace_path,
                    markers=decorator_markers(node.decorator_list),
                    parameter_count=None,
                    kind=DeclarationKind.CLASS,
                    imports=scope.imports,
                    source=f"{scope.location}:{node.lineno}",
                )
                yield from self._visit_scope(
                    node.body,
                    scope._replace(qualifier=class_qualifier, in_class=True, imports=frozenset()),
                )
            elif isinstance(node, ast.FunctionDef | ast.AsyncFunctionDef):
                facts = collect_body_facts(node.body, scope.package)
                yield Declaration(
                    name=".".join((*scope.qualifier, node.name)),
                    namespace_path=scope.namespace_path,
                    markers=decorator_markers(node.decorator_list),
                    parameter_count=count_parameters(node, is_method=scope.in_class),
                    kind=DeclarationKind.METHOD if scope.in_class else DeclarationKind.FUNCTION,
                    calls=facts.calls,
                    raises=facts.raises,
                    imports=scope.imports | facts.imports,
                    source=f"{scope.location}:{node.lineno}",
                )


class _Scope(NamedTuple):
    namespace_path: tuple[str, ...]
    qualifier: tuple[str, ...]
    package: tuple[str, ...]
    location: str
    in_class: bool
    imports: frozenset[str]  # Inherited from the enclosing module
