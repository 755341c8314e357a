"""
Console Kernel
Entry point of the `bladeview` command line tool

Usage:
    bladeview [--views=dir1:dir2] [--cache=dir] [--env=.env] [--verbose] [--json] <command> [args]
"""
import asyncio
import os
import sys
import traceback
from typing import Dict, List, Optional, Sequence

from bladeview.blade import Blade
from bladeview.console.command import Command
from bladeview.console.commands import ContainerCommand, ViewCacheCommand, ViewClearCommand
from bladeview.defaults import DEFAULT_CACHE_PATH, DEFAULT_VIEW_PATH, ENV_CACHE_PATH, ENV_VIEW_PATHS
from bladeview.exceptions import BladeException
from bladeview.logging import DEBUG, WARNING, LoggerConfig
from bladeview.support.env_helper import EnvHelper


class Kernel:
    # Built-in commands
    COMMANDS = [
        ViewCacheCommand,
        ViewClearCommand,
        ContainerCommand,
    ]

    def __init__(self, blade: Optional[Blade] = None, commands: Optional[Sequence[type]] = None):
        self.blade = blade
        self.commands: Dict[str, Command] = {}

        for command_class in (commands if commands is not None else self.COMMANDS):
            self.register(command_class())

    def register(self, command: Command) -> None:
        """Register a command instance under its name (or each subcommand name)"""
        if isinstance(command.signature, list):
            for sig in command.signature:
                self.commands[sig['command']] = command
        else:
            self.commands[command.name] = command

    def show_help(self):
        """Show available commands"""
        print("bladeview - Blade view tooling")
        print()
        print("Options:")
        print(f"  {'--views=DIR[' + os.pathsep + 'DIR...]':<35} View directories (default: ${ENV_VIEW_PATHS})")
        print(f"  {'--cache=DIR':<35} Compiled view directory (default: ${ENV_CACHE_PATH})")
        print(f"  {'--env=FILE':<35} .env file to load")
        print(f"  {'--verbose':<35} Log at DEBUG level")
        print(f"  {'--json':<35} Log as JSON")
        print()

        if not self.commands:
            print("No commands available.")
            return

        categories: Dict[str, List[str]] = {}
        for name, cmd in self.commands.items():
            category = name.split(':')[0] if ':' in name else 'general'
            description = cmd.description
            args = ''

            if isinstance(cmd.signature, list):
                sig = next(s for s in cmd.signature if s['command'] == name)
                description = sig['description']
                args = sig.get('args', '')

            categories.setdefault(category, []).append(f"  {(name + ' ' + args).strip():<35} {description}")

        for category in sorted(categories):
            print(f"{category.upper()}:")
            for entry in sorted(categories[category]):
                print(entry)
            print()

        print("Run 'bladeview help <command>' for detailed information")

    async def run(self, argv: Sequence[str]) -> int:
        """Run the CLI application"""
        args, options = self._parse_args(argv[1:])

        if not args:
            self.show_help()
            return 0

        command_name = args[0]

        if command_name == 'help' or options.get('help') or options.get('h'):
            return self._help(args[1] if len(args) > 1 else None)

        if command_name not in self.commands:
            print(f"❌ Unknown command: {command_name}\n")
            self.show_help()
            return 1

        self._configure_logging(options)

        command = self.commands[command_name]

        try:
            command.blade = self.make_blade(options)

            if isinstance(command.signature, list):
                # container:list -> list
                action = command_name.split(':')[-1]
                exit_code = await command.handle(action, *args[1:])
            else:
                exit_code = await command.handle(*args[1:])

            return exit_code if exit_code is not None else 0

        except KeyboardInterrupt:
            print("\n\n⚠ Command interrupted by user")
            return 130
        except (BladeException, OSError) as e:
            print(f"\n❌ Error executing command: {e}\n")
            return 1
        except Exception as e:
            print(f"\n❌ Error executing command: {e}\n")
            traceback.print_exc()
            return 1

    def _help(self, command_name: Optional[str]) -> int:
        if command_name is None:
            self.show_help()
            return 0

        if command_name not in self.commands:
            print(f"Unknown command: {command_name}\n")
            self.show_help()
            return 1

        cmd = self.commands[command_name]
        print(f"\nCommand: {command_name}")
        print(f"Description: {cmd.description}")
        if not isinstance(cmd.signature, list):
            print(f"Signature: {cmd.signature}")
        return 0

    def make_blade(self, options: Dict[str, object]) -> Blade:
        """Use the injected Blade, or build one from options and the environment"""
        if self.blade is not None:
            return self.blade

        EnvHelper.load(options.get('env'))

        if options.get('views'):
            view_paths = [path for path in str(options['views']).split(os.pathsep) if path]
        else:
            view_paths = EnvHelper.get_list(ENV_VIEW_PATHS, [DEFAULT_VIEW_PATH])

        cache_path = options.get('cache') or EnvHelper.get(ENV_CACHE_PATH, DEFAULT_CACHE_PATH)

        self.blade = Blade(view_paths, str(cache_path))
        return self.blade

    def _configure_logging(self, options: Dict[str, object]) -> None:
        if not (options.get('verbose') or options.get('json')):
            return

        LoggerConfig.setup_logger(
            'bladeview',
            format_type='json' if options.get('json') else 'text',
            level=DEBUG if options.get('verbose') else WARNING,
        )

    def _parse_args(self, argv):
        """
        Parse command line arguments
        Returns tuple of (positional_args, keyword_args)
        """
        args = []
        kwargs = {}

        for arg in argv:
            if arg.startswith('--'):
                # Long option (--verbose, --cache=value)
                if '=' in arg:
                    key, value = arg[2:].split('=', 1)
                    if value.lower() in ('true', 'false'):
                        kwargs[key] = value.lower() == 'true'
                    else:
                        kwargs[key] = value
                else:
                    # Boolean flag
                    kwargs[arg[2:]] = True
            elif arg.startswith('-'):
                # Short option
                kwargs[arg[1:]] = True
            else:
                # Positional argument
                args.append(arg)

        return args, kwargs


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console script entry point"""
    return asyncio.run(Kernel().run(list(argv) if argv is not None else sys.argv))
