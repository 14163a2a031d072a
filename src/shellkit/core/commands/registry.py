from __future__ import annotations

"""
Subcommand Registry.

Maps each Subcommand to its handler. Every handler takes the raw argument
list plus the validated configuration and returns the text to print.
"""

from typing import Any, Callable, Dict, List

from shellkit.core.commands.basic import run_cat, run_echo, run_ls
from shellkit.core.commands.grep import run_grep
from shellkit.core.commands.tree import run_tree
from shellkit.domain.commands import Subcommand

Handler = Callable[[List[str], Dict[str, Any]], str]

HANDLERS: Dict[Subcommand, Handler] = {
    Subcommand.ECHO: run_echo,
    Subcommand.CAT: run_cat,
    Subcommand.LS: run_ls,
    Subcommand.TREE: run_tree,
    Subcommand.GREP: run_grep,
}


def dispatch(command: Subcommand, args: List[str], config: Dict[str, Any]) -> str:
    """Run the handler registered for command."""
    return HANDLERS[command](args, config)
