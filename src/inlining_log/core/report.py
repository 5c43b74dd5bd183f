from __future__ import annotations

"""
Inlining Report Generator.

Renders an inlining log in the configured shape and optionally echoes the
result to the diagnostic log or saves it next to other compiler output.
"""

import logging
from typing import Any, Dict, List, Optional

from inlining_log.core.decision_log import InliningLog
from inlining_log.domain.config import validate_report_config
from inlining_log.infra.fs import save_lines
from inlining_log.infra.logging import level_from_name

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_inlining_report(
        log: InliningLog,
        config: Optional[Dict[str, Any]] = None,
) -> List[str]:
    """
    Render `log` according to `config`.

    Args:
        log: Root inlining log of one compilation.
        config: Report configuration (see domain.config); defaults if None.

    Returns:
        List[str]: Lines of the rendered report.
    """
    cfg, warnings = validate_report_config(config)
    for warning in warnings:
        logger.warning(f"Report config: {warning}")

    fmt = cfg["format"]
    logger.info(f"Generating inlining report ({fmt}) for {len(log)} top-level decisions")

    lines = log.tree_lines() if fmt == "tree" else log.list_lines()

    if cfg["print_to_log"]:
        logger.log(level_from_name(cfg["log_level"]), "Inlining report:\n" + "\n".join(lines))

    if cfg["save_path"]:
        ok, error = save_lines(cfg["save_path"], lines)
        if ok:
            logger.info(f"Inlining report saved to file: {cfg['save_path']}")
        else:
            logger.error(f"Failed to save inlining report to '{cfg['save_path']}': {error}")

    return lines
