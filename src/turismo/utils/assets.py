import logging
from pathlib import Path

import sass

_log = logging.getLogger(__name__)


def compile_scss(source: str | Path, target: str | Path) -> None:
    """Compile `source` SCSS file into `target` CSS file if needed.

    If the target file does not exist or the source has been modified more
    recently, a fresh compilation is triggered. Errors are logged instead of
    raised so that a broken stylesheet does not keep the landing page from
    starting; the last generated CSS keeps being served.
    """
    src_path = Path(source)
    tgt_path = Path(target)

    if not src_path.exists():
        _log.warning("[scss] source not found: %s", src_path)
        return

    if tgt_path.exists() and tgt_path.stat().st_mtime >= src_path.stat().st_mtime:
        # Up-to-date
        return

    try:
        css = sass.compile(filename=str(src_path), output_style="compressed")
    except sass.CompileError as exc:
        _log.error("[scss] failed to compile %s: %s", src_path, exc)
        return

    try:
        tgt_path.parent.mkdir(parents=True, exist_ok=True)
        tgt_path.write_text(css, encoding="utf-8")
    except OSError as exc:
        _log.error("[scss] failed to write %s: %s", tgt_path, exc)
        return

    _log.info("[scss] compiled %s -> %s", src_path.name, tgt_path.name)
