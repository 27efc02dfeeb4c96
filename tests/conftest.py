import logging
from pathlib import Path

import pytest

from sablan_text.config import load_settings


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path):
    """A small ERP-like tree with a few corrupted lines."""

    root = tmp_path / "erp"
    write(
        root / "frontend/src/lib/labels.ts",
        "export const a = 'سنگ';\nexport const b = 'Ø³Ù†Ú¯';\n",
    )
    write(root / "frontend/src/app/page.tsx", "ok\r\nconst t = '????';\r\n")
    write(root / "backend/src/routes/mines.ts", "const name = 'معدن';\n")
    write(root / "frontend/src/node_modules/dep/index.js", "const x = 'Ø';\n")
    write(root / "frontend/src/.cache/x.ts", "const x = 'Ø';\n")
    write(root / "frontend/src/readme.md", "Ø\n")
    (root / "backend/prisma").mkdir(parents=True)
    (root / "backend/prisma/seed.prisma").write_bytes(b"model Mine {\n  name \xff\n}\n")
    return root


@pytest.fixture
def settings(project):
    return load_settings(project)


@pytest.fixture
def reset_logging():
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.setLevel(logging.WARNING)
