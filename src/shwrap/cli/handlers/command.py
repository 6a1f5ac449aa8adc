"""Handlers for ``shwrap command ...``."""

from __future__ import annotations

from shwrap.cli.context import Context
from shwrap.cli.theme import console
from shwrap.configs import PolicyDocument
from shwrap.core.exceptions import CommandDisabledError, CommandNotConfiguredError
from shwrap.policy.resolver import resolve
from shwrap.sandboxes import BubblewrapSandbox


def prepare_sandbox(
    context: Context, document: PolicyDocument, command: str
) -> BubblewrapSandbox:
    """Resolve the policy for a command.

    Raises:
        CommandNotConfiguredError: If the command is not in the document.
        CommandDisabledError: If the command has ``enabled: false``.
    """
    command_policy = document.get_command(command)
    if command_policy is None:
        raise CommandNotConfiguredError(command)
    if not command_policy.enabled:
        raise CommandDisabledError(command)

    effective = resolve(document, command_policy)
    return BubblewrapSandbox(
        effective, context.environment, binary=context.settings.sandbox_binary
    )


def handle_list(args, context: Context) -> int:
    """List enabled commands in document order."""
    _, document = context.load_document()
    enabled = document.enabled_commands()

    if args.simple:
        for name in enabled:
            print(name)
        return 0

    if not enabled:
        console.print("No enabled commands configured", style="muted")
        return 0

    console.print("Active command configurations:")
    for name, policy in enabled.items():
        console.print()
        console.print(f"{name}:", style="command", markup=False)
        if policy.extends:
            console.print(f"  extends: {policy.extends}", markup=False)
        if policy.shared_namespaces:
            console.print(
                f"  share: {', '.join(policy.shared_namespaces)}", markup=False
            )
        if policy.bind:
            console.print(f"  bind: {', '.join(policy.bind)}", markup=False)
    return 0


def handle_show(args, context: Context) -> int:
    """Print the command line that ``exec`` would run."""
    _, document = context.load_document()
    sandbox = prepare_sandbox(context, document, args.command)
    print(sandbox.show(args.command, args.args))
    return 0


def handle_exec(args, context: Context) -> int:
    """Run a command inside the sandbox and return its exit code."""
    _, document = context.load_document()
    sandbox = prepare_sandbox(context, document, args.command)
    return sandbox.exec(args.command, args.args)
