"""
logging.py

Thin wrapper around the standard library logger. Messages can be mirrored
to the running Streamlit page when the caller asks for it.
"""

from __future__ import annotations

import logging
from typing import Optional


class Logger:
    """Named logger with an optional Streamlit echo."""

    def __init__(self, job_name: str, user_id: Optional[str] = None, use_streamlit: bool = False):
        self.job_name = job_name
        self.user_id = user_id
        self.use_streamlit = use_streamlit
        self._logger = logging.getLogger(job_name)

    def _format(self, message: str) -> str:
        if self.user_id:
            return f"[{self.user_id}] {message}"
        return message

    def _echo(self, kind: str, message: str, streamlit_off: bool) -> None:
        if not self.use_streamlit or streamlit_off:
            return
        import streamlit as st

        getattr(st, kind)(message)

    def debug(self, message: str) -> None:
        self._logger.debug(self._format(message))

    def info(self, message: str, streamlit_off: bool = False) -> None:
        self._logger.info(self._format(message))
        self._echo("info", message, streamlit_off)

    def warning(self, message: str, streamlit_off: bool = False) -> None:
        self._logger.warning(self._format(message))
        self._echo("warning", message, streamlit_off)

    def error(self, message: str, streamlit_off: bool = False) -> None:
        self._logger.error(self._format(message))
        self._echo("error", message, streamlit_off)

    def success(self, message: str, streamlit_off: bool = False) -> None:
        self._logger.info(self._format(message))
        self._echo("success", message, streamlit_off)
