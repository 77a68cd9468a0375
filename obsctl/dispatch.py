"""
Command dispatch - click groups and commands that can be invoked by alias.
"""

import click


class AliasedCommand(click.Command):
    """A leaf command with optional short aliases."""

    def __init__(self, *args, aliases=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.aliases = tuple(aliases)


class AliasedGroup(click.Group):
    """
    A group whose subcommands can be selected by name or by alias.

    Subcommands and subgroups created through this group's ``command`` and
    ``group`` decorators accept an ``aliases`` keyword as well.
    """

    command_class = AliasedCommand
    group_class = type

    def __init__(self, *args, aliases=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.aliases = tuple(aliases)

    def list_commands(self, ctx):
        # Registration order, not alphabetical
        return list(self.commands)

    def get_command(self, ctx, cmd_name):
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd
        for command in self.commands.values():
            if cmd_name in getattr(command, 'aliases', ()):
                return command
        return None

    def resolve_command(self, ctx, args):
        cmd_name = args[0] if args else ''
        if (
            self.get_command(ctx, cmd_name) is None
            and not ctx.resilient_parsing
            and not cmd_name.startswith('-')
        ):
            ctx.fail(f"No such command '{cmd_name}'. Choose from: {self.describe_choices(ctx)}")

        _, cmd, args = super().resolve_command(ctx, args)
        # Report the canonical name, not the alias that was typed
        return (cmd.name if cmd is not None else None), cmd, args

    def describe_choices(self, ctx) -> str:
        return ', '.join(self._labels(ctx).values())

    def _labels(self, ctx) -> dict:
        labels = {}
        for name in self.list_commands(ctx):
            cmd = self.commands[name]
            if cmd.hidden:
                continue
            aliases = getattr(cmd, 'aliases', ())
            labels[name] = f"{name} ({', '.join(aliases)})" if aliases else name
        return labels

    def format_commands(self, ctx, formatter):
        labels = self._labels(ctx)
        if not labels:
            return

        limit = formatter.width - 6 - max(len(label) for label in labels.values())
        rows = [
            (label, self.commands[name].get_short_help_str(limit))
            for name, label in labels.items()
        ]
        with formatter.section('Commands'):
            formatter.write_dl(rows)
