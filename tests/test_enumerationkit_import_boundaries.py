import ast
from pathlib import Path

CORE_MODULES = ("__init__.py", "records.py", "builder.py", "combinators.py", "config.py")
FORBIDDEN_PREFIXES = ("yaml", "os", "pathlib", "enumerationkit.config_io")


def test_core_modules_do_not_import_io_modules():
    repo_root = Path(__file__).resolve().parents[1]
    package_dir = repo_root / "enumerationkit"

    offenders: list[str] = []
    for name in CORE_MODULES:
        path = package_dir / name
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name.split(".")[0] in FORBIDDEN_PREFIXES or alias.name in FORBIDDEN_PREFIXES:
                        offenders.append(f"{path}: import {alias.name}")
            elif isinstance(node, ast.ImportFrom):
                if node.module is None:
                    continue
                if node.module.split(".")[0] in FORBIDDEN_PREFIXES or node.module in FORBIDDEN_PREFIXES:
                    offenders.append(f"{path}: from {node.module} import ...")

    assert offenders == []


def test_importing_enumerationkit_does_not_pull_in_yaml():
    import subprocess
    import sys
    import textwrap

    code = textwrap.dedent(
        """\
        import sys

        import enumerationkit

        if "yaml" in sys.modules:
            raise SystemExit("Importing enumerationkit loaded yaml")
        """
    )

    proc = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[1]),
    )
    assert proc.returncode == 0, proc.stderr or proc.stdout
