"""Allow ``python -m ksortable`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m ksortable`` behaves identically to the ``ksortable``
console script.
"""

from __future__ import annotations

from ksortable.cli.app import cli

if __name__ == "__main__":
    cli()
