"""kubectl-backed resource query service.

Every query returns the text kubectl printed. Failures are not raised:
kubectl's own error text is forwarded, and process-level failures
(missing binary, timeout) become a one-line ``error:`` message, so the
detail pane always has something to show.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from collections.abc import Callable, Mapping
from typing import Protocol, runtime_checkable

from kubedeck.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    CONTEXT_LOOKUP_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubedeck.constants.values import KUBECTL_BINARY
from kubedeck.controllers.base import BaseController, CommandResult
from kubedeck.controllers.kubectl.request import KubectlRequest

logger = logging.getLogger(__name__)

Flags = Mapping[str, str]


@runtime_checkable
class ResourceQueryService(Protocol):
    """Request-shaped cluster queries returning raw text."""

    def fetch(
        self,
        kind: str,
        name: str | None = None,
        flags: Flags | None = None,
        namespace: str | None = None,
    ) -> str: ...

    def describe(self, kind: str, name: str, namespace: str | None = None) -> str: ...

    def logs(
        self,
        name: str | None = None,
        flags: Flags | None = None,
        namespace: str | None = None,
    ) -> str: ...

    def top_node(self, flags: Flags | None = None) -> str: ...

    def top_pod(
        self,
        name: str | None = None,
        flags: Flags | None = None,
        namespace: str | None = None,
    ) -> str: ...

    def current_context(self) -> str | None: ...


class KubectlController(BaseController):
    """Runs kubectl subcommands for the dashboard."""

    def __init__(
        self,
        context: str | None = None,
        kubectl_path: str = KUBECTL_BINARY,
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
        command_timeout: int = KUBECTL_COMMAND_TIMEOUT,
        runner: Callable[..., subprocess.CompletedProcess[str]] | None = None,
    ) -> None:
        """Initialize the kubectl controller.

        Args:
            context: Optional kubeconfig context name.
            kubectl_path: kubectl executable.
            request_timeout: Value for ``--request-timeout``.
            command_timeout: Process timeout in seconds.
            runner: ``subprocess.run`` replacement, for tests.
        """
        super().__init__(context)
        self.kubectl_path = kubectl_path
        self.request_timeout = request_timeout
        self.command_timeout = command_timeout
        self._runner = runner or subprocess.run

    # =========================================================================
    # Command execution
    # =========================================================================

    def build_command(self, request: KubectlRequest) -> list[str]:
        cmd = [self.kubectl_path]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(request.to_args())
        if self.request_timeout:
            cmd.append(f"--request-timeout={self.request_timeout}")
        return cmd

    def _command_timeout(self) -> int:
        # Keep subprocess timeouts tight under pytest so stray workers
        # finish before test teardown.
        if os.environ.get("PYTEST_CURRENT_TEST"):
            return min(self.command_timeout, 10)
        return self.command_timeout

    def execute(self, request: KubectlRequest) -> CommandResult:
        """Run one request and capture its output."""
        cmd = self.build_command(request)
        args = tuple(cmd[1:])
        started = time.monotonic()
        try:
            completed = self._runner(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._command_timeout(),
            )
        except FileNotFoundError:
            logger.error("kubectl executable not found: %s", self.kubectl_path)
            return CommandResult(
                args=args,
                stderr=f"error: {self.kubectl_path} not found\n",
                returncode=127,
            )
        except subprocess.TimeoutExpired:
            logger.warning("kubectl %s timed out", " ".join(args))
            return CommandResult(
                args=args,
                stderr=f"error: kubectl timed out after {self._command_timeout()}s\n",
                returncode=124,
            )
        except OSError as exc:
            logger.error("kubectl %s failed to start: %s", " ".join(args), exc)
            return CommandResult(args=args, stderr=f"error: {exc}\n", returncode=126)

        duration_ms = (time.monotonic() - started) * 1000
        result = CommandResult(
            args=args,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            returncode=completed.returncode,
            duration_ms=duration_ms,
        )
        if result.success:
            logger.debug("kubectl %s took %.0fms", " ".join(args), duration_ms)
        else:
            logger.info(
                "kubectl %s exited with %s: %s",
                " ".join(args),
                result.returncode,
                result.stderr.strip(),
            )
        return result

    def run(self, request: KubectlRequest) -> str:
        return self.execute(request).output

    # =========================================================================
    # Resource queries
    # =========================================================================

    def fetch(
        self,
        kind: str,
        name: str | None = None,
        flags: Flags | None = None,
        namespace: str | None = None,
    ) -> str:
        """``kubectl get <kind> [name]``."""
        return self.run(
            KubectlRequest(
                verb=("get",),
                kind=kind,
                name=name or "",
                flags=dict(flags or {}),
                namespace=namespace or "",
            )
        )

    def describe(self, kind: str, name: str, namespace: str | None = None) -> str:
        """``kubectl describe <kind> <name>``."""
        return self.run(
            KubectlRequest(
                verb=("describe",),
                kind=kind,
                name=name,
                namespace=namespace or "",
            )
        )

    def logs(
        self,
        name: str | None = None,
        flags: Flags | None = None,
        namespace: str | None = None,
    ) -> str:
        """``kubectl logs [pod]``; selector-based when no name is given."""
        return self.run(
            KubectlRequest(
                verb=("logs",),
                name=name or "",
                flags=dict(flags or {}),
                namespace=namespace or "",
            )
        )

    def top_node(self, flags: Flags | None = None) -> str:
        """``kubectl top node``."""
        return self.run(KubectlRequest(verb=("top", "node"), flags=dict(flags or {})))

    def top_pod(
        self,
        name: str | None = None,
        flags: Flags | None = None,
        namespace: str | None = None,
    ) -> str:
        """``kubectl top pod [name]``."""
        return self.run(
            KubectlRequest(
                verb=("top", "pod"),
                name=name or "",
                flags=dict(flags or {}),
                namespace=namespace or "",
            )
        )

    # =========================================================================
    # Context
    # =========================================================================

    def current_context(self) -> str | None:
        """Resolve the context in use: the configured one, else kubeconfig's."""
        if self.context:
            return self.context
        try:
            completed = self._runner(
                [self.kubectl_path, "config", "current-context"],
                capture_output=True,
                text=True,
                timeout=CONTEXT_LOOKUP_TIMEOUT,
            )
        except (OSError, subprocess.TimeoutExpired):
            return None

        if completed.returncode != 0:
            return None
        resolved = (completed.stdout or "").strip()
        return resolved or None

    def check_connection(self) -> bool:
        """Return True when the API server answers a version query."""
        result = self.execute(KubectlRequest(verb=("version",), flags={"output": "json"}))
        return result.success


__all__ = ["Flags", "KubectlController", "ResourceQueryService"]
