"""Promote notebook header metadata for a directory of notebooks.

Run from repo root: python examples/site/promote_metadata.py path/to/notebooks
Prints the metadata each notebook would contribute to its page.
"""

import logging
import sys
from pathlib import Path

from nbfront import NotebookConfig, NotebookConverter, Page, SimpleSite, promote_site_metadata

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

root = Path(sys.argv[1] if len(sys.argv) > 1 else ".")
config = NotebookConfig.from_dict({"notebook_ext": "ipynb"})
converter = NotebookConverter(config)

pages = [
    Page(content=path.read_text(encoding="utf-8"), ext=path.suffix, path=str(path))
    for path in sorted(root.rglob("*.ipynb"))
]
report = promote_site_metadata(SimpleSite(pages=pages), converter)

for page in pages:
    print(f"{page.path}: {page.data} (templating={page.templating})")
print(report)
