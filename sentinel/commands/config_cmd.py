"""ConfigCommand — Show or set workspace configuration."""

from ..commands.base import BaseCommand
from ..config import TINT_ENABLED_KEY


class ConfigCommand(BaseCommand):

    def show_config(self):
        """Show current configuration."""
        print(self.config_manager.display())

    def set_config(self, key: str, value: str):
        """Set a configuration value, then refresh the indicator."""
        error = self.config_manager.set(key, value)
        if error:
            print(f"Error: {error}")
            return error

        print(f"{self.symbols.check_pass} Set {key} = {value}")
        print(f"  Saved to {self.config_manager.config_path}")
        if key == TINT_ENABLED_KEY:
            self.engine.reset()
        self.refresh()
        return None


def register_parser(subparsers):
    p = subparsers.add_parser('config', help='View or set configuration')
    p.add_argument('--set', metavar='KEY=VALUE',
                   help='Set config value (e.g., sentinel.icon_prod=rocket)')
    return p


def handle(cli, args):
    if args.set:
        if '=' not in args.set:
            print("Error: Use format KEY=VALUE (e.g., sentinel.icon_prod=rocket)")
        else:
            key, value = args.set.split('=', 1)
            cli._config_cmd.set_config(key.strip(), value.strip())
    else:
        cli._config_cmd.show_config()
