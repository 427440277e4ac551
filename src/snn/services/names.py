"""NameService — strict and batch validation of style names.

``parse`` is the strict path: one name, failure carries the error kind.
``check`` is the lenient batch path: every name gets a verdict and the
result fails if any name is invalid.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from snn.config.models import CheckConfig
from snn.domain.errors import StyleNameError
from snn.domain.style_name import StyleName
from snn.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class NameService:
    """Validate style names and package the outcome as ServiceResult."""

    def __init__(self, config: CheckConfig | None = None) -> None:
        self._config = config or CheckConfig()

    def parse(self, raw: str) -> ServiceResult:
        """Strictly parse a single name."""
        try:
            style = StyleName(raw)
        except StyleNameError as exc:
            logger.debug("Rejected style name %r: %s", raw, exc)
            return ServiceResult(
                ok=False,
                op="parse",
                error=ServiceError(
                    code=exc.kind.code,
                    message=str(exc),
                    detail={"name": display_name(raw)},
                ),
            )
        return ServiceResult(
            ok=True,
            op="parse",
            data={
                "name": str(style),
                "base": style.base,
                "suffix": style.suffix,
                "length": len(style.name.encode("utf-8")),
            },
        )

    def check(self, names: Iterable[str], *, fail_fast: bool | None = None) -> ServiceResult:
        """Validate every name in *names*.

        Args:
            names: Candidate names, already stripped of line terminators.
            fail_fast: Stop at the first invalid name. Defaults to the
                ``[check] fail_fast`` setting.
        """
        stop_early = self._config.fail_fast if fail_fast is None else fail_fast
        items: list[dict[str, Any]] = []
        invalid = 0
        for name in names:
            item = _verdict(name)
            items.append(item)
            if not item["valid"]:
                invalid += 1
                logger.debug("Rejected style name %r: %s", name, item["error"])
                if stop_early:
                    break

        if not items:
            return ServiceResult(
                ok=False,
                op="check",
                error=ServiceError(code="NO_INPUT", message="no names given"),
            )

        data = {
            "count": len(items),
            "valid_count": len(items) - invalid,
            "invalid_count": invalid,
            "items": items,
        }
        if invalid:
            return ServiceResult(
                ok=False,
                op="check",
                data=data,
                error=ServiceError(
                    code="INVALID_NAMES",
                    message=f"{invalid} of {len(items)} names invalid",
                    detail={"items": [i for i in items if not i["valid"]]},
                ),
            )
        return ServiceResult(ok=True, op="check", data=data)

    def read_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield candidate names from text lines.

        Removes line terminators only; blank and comment lines are skipped
        according to the ``[check]`` settings.
        """
        prefix = self._config.comment_prefix
        for line in lines:
            name = line.rstrip("\r\n")
            if self._config.skip_blank_lines and not name.strip():
                continue
            if prefix and name.startswith(prefix):
                continue
            yield name


def display_name(raw: str) -> str:
    """Return a copy of *raw* that is safe to serialize.

    Undecodable bytes arrive from argv or files as lone surrogates; they are
    shown as backslash escapes.
    """
    return raw.encode("utf-8", "backslashreplace").decode("utf-8")


def _verdict(name: str) -> dict[str, Any]:
    try:
        StyleName(name)
    except StyleNameError as exc:
        return {"name": display_name(name), "valid": False, "error": exc.kind.code}
    return {"name": name, "valid": True, "error": None}
