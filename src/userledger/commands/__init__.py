"""
CLI commands for userledger.
"""

from .base import BaseCommand, CommandContext
from .register import RegisterCommand
from .list import ListCommand
from .check import CheckCommand
from .serve import ServeCommand

__all__ = [
    'BaseCommand',
    'CommandContext',
    'RegisterCommand',
    'ListCommand',
    'CheckCommand',
    'ServeCommand',
]

COMMAND_REGISTRY = {
    'register': RegisterCommand,
    'list': ListCommand,
    'check': CheckCommand,
    'serve': ServeCommand,
}
