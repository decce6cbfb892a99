"""
Command Line Interface
Runs sanicview commands: sanicview <command> [args] [--options]
"""
import asyncio
import logging
import sys
from typing import Dict, List, Tuple

from sanicview.console.command import Command
from sanicview.console.commands import LayoutsCommand, RenderCommand


class Cli:

    COMMANDS = [
        RenderCommand,
        LayoutsCommand,
    ]

    def __init__(self, engine=None):
        self.commands: Dict[str, Command] = {}
        for command_class in self.COMMANDS:
            command = command_class(engine)
            self.commands[command.name] = command

    def show_help(self):
        """Show available commands"""
        print("sanicview - view rendering CLI")
        print()
        for name in sorted(self.commands):
            command = self.commands[name]
            print(f"  {name:<16} {command.description}")
            print(f"  {'':<16} {command.signature}")
        print()
        print("Run 'sanicview help <command>' for detailed information")

    async def run(self, argv: List[str]) -> int:
        """Run the CLI application"""
        if len(argv) < 2:
            self.show_help()
            return 0

        command_name = argv[1]

        if command_name in ['help', '--help', '-h']:
            if len(argv) > 2:
                command = self.commands.get(argv[2])
                if command is None:
                    print(f"Unknown command: {argv[2]}\n")
                    self.show_help()
                    return 1
                print(f"\nCommand: {command.name}")
                print(f"Description: {command.description}")
                print(f"Signature: {command.signature}")
                return 0
            self.show_help()
            return 0

        if command_name not in self.commands:
            print(f"❌ Unknown command: {command_name}\n")
            self.show_help()
            return 1

        args, kwargs = self._parse_args(argv[2:])

        if kwargs.pop('verbose', False):
            from sanicview.logging import LoggerConfig
            LoggerConfig.setup_logger('sanicview', format_type='text', level=logging.DEBUG)

        try:
            exit_code = await self.commands[command_name].handle(*args, **kwargs)
        except KeyboardInterrupt:
            print("\n\n⚠ Command interrupted by user")
            return 130

        return exit_code if exit_code is not None else 0

    def _parse_args(self, argv: List[str]) -> Tuple[list, dict]:
        """
        Parse command line arguments
        Returns tuple of (positional_args, keyword_args)
        """
        args = []
        kwargs = {}

        for arg in argv:
            if arg.startswith('--'):
                # Long option (--verbose, --name=value)
                if '=' in arg:
                    key, value = arg[2:].split('=', 1)
                    kwargs[key] = value
                else:
                    kwargs[arg[2:]] = True
            elif arg.startswith('-') and len(arg) > 1:
                kwargs[arg[1:]] = True
            else:
                args.append(arg)

        return args, kwargs


def main():
    from sanicview.support import EnvHelper

    EnvHelper.load()
    sys.exit(asyncio.run(Cli().run(sys.argv)))


if __name__ == '__main__':
    main()
