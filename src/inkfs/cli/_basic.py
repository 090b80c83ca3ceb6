"""Basic commands: ls, cat, write, touch, mkdir, rename, mv, cp, rm, exists."""

from __future__ import annotations

import sys

import click

from ..tree import walk_nodes
from ._helpers import (
    main,
    _echo_json,
    _format_option,
    _get_fs,
    _handle_errors,
    _status,
)


# ---------------------------------------------------------------------------
# ls
# ---------------------------------------------------------------------------

def _format_size(node) -> str:
    return "-" if node.size is None else str(node.size)


@main.command()
@click.argument("path", default=".")
@click.option("-R", "--recursive", is_flag=True, default=False,
              help="List subdirectories recursively.")
@click.option("-l", "--long", "long_", is_flag=True, default=False,
              help="Show size and modification time.")
@_format_option
@click.pass_context
def ls(ctx, path, recursive, long_, fmt):
    """List a directory, directories first.

    \b
    Examples:
        inkfs ls notes
        inkfs ls -R -l notes
        inkfs ls --format json notes
    """
    with _handle_errors():
        nodes = _get_fs(ctx).read_directory(path, recursive)

    if fmt == "json":
        _echo_json([n.to_dict() for n in nodes])
        return

    for depth, node in walk_nodes(nodes):
        name = node.name + ("/" if node.is_directory else "")
        indent = "  " * depth
        if long_:
            modified = "-" if node.modified is None else str(node.modified)
            click.echo(f"{_format_size(node):>10} {modified:>10} {indent}{name}")
        else:
            click.echo(f"{indent}{name}")


# ---------------------------------------------------------------------------
# cat
# ---------------------------------------------------------------------------

@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--binary", is_flag=True, default=False,
              help="Print file bytes as base64.")
@click.pass_context
def cat(ctx, paths, binary):
    """Print file contents to stdout."""
    fs = _get_fs(ctx)
    for path in paths:
        with _handle_errors():
            if binary:
                click.echo(fs.read_file_binary(path))
            else:
                click.echo(fs.read_file(path), nl=False)


# ---------------------------------------------------------------------------
# write
# ---------------------------------------------------------------------------

@main.command()
@click.argument("path")
@click.option("--binary", is_flag=True, default=False,
              help="Input is base64 text; write the decoded bytes.")
@click.option("--from", "from_file", type=click.File("rb"), default=None,
              help="Read content from FILE instead of stdin.")
@click.pass_context
def write(ctx, path, binary, from_file):
    """Write stdin to a file, replacing it and creating parent directories."""
    fs = _get_fs(ctx)
    data = from_file.read() if from_file is not None else sys.stdin.buffer.read()
    with _handle_errors():
        if binary:
            fs.write_file_binary(path, data.decode("ascii", errors="replace").strip())
        else:
            try:
                text = data.decode(fs.encoding)
            except UnicodeDecodeError as exc:
                raise click.ClickException(f"Input is not valid {fs.encoding} text: {exc}")
            fs.write_file(path, text)
    _status(ctx, f"Wrote {path}")


# ---------------------------------------------------------------------------
# touch / mkdir
# ---------------------------------------------------------------------------

@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_context
def touch(ctx, paths):
    """Create new empty files.  Fails if a path already exists."""
    fs = _get_fs(ctx)
    for path in paths:
        with _handle_errors():
            fs.create_file(path)
        _status(ctx, f"Created {path}")


@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("-p", "--parents", is_flag=True, default=False,
              help="No error if the directory exists.")
@click.pass_context
def mkdir(ctx, paths, parents):
    """Create directories (and missing parents)."""
    fs = _get_fs(ctx)
    for path in paths:
        with _handle_errors():
            if parents:
                fs.ensure_dir(path)
            else:
                fs.create_directory(path)
        _status(ctx, f"Created {path}/")


# ---------------------------------------------------------------------------
# rename / mv
# ---------------------------------------------------------------------------

@main.command()
@click.argument("old")
@click.argument("new")
@click.pass_context
def rename(ctx, old, new):
    """Rename OLD to exactly NEW.  Fails if NEW exists."""
    with _handle_errors():
        _get_fs(ctx).rename_path(old, new)
    _status(ctx, f"Renamed {old} -> {new}")


@main.command()
@click.argument("sources", nargs=-1, required=True)
@click.argument("dest")
@click.pass_context
def mv(ctx, sources, dest):
    """Move files or directories.

    If DEST is an existing directory, sources move into it.  Fails if the
    target already exists.

    \b
    Examples:
        inkfs mv old.md new.md
        inkfs mv a.md b.md archive/
    """
    fs = _get_fs(ctx)
    for src in sources:
        with _handle_errors():
            result = fs.move_path(src, dest)
        _status(ctx, f"Moved {result.source} -> {result.target}")


# ---------------------------------------------------------------------------
# cp
# ---------------------------------------------------------------------------

@main.command()
@click.argument("sources", nargs=-1, required=True)
@click.argument("dest")
@click.option("-n", "--dry-run", is_flag=True, default=False,
              help="Show where each copy would go without copying.")
@click.pass_context
def cp(ctx, sources, dest, dry_run):
    """Copy files or directories (recursively).

    Never overwrites: if the target exists, "name (copy).ext",
    "name (copy 2).ext", ... is used.  Prints the path written.

    \b
    Examples:
        inkfs cp note.md notes/             # -> notes/note.md
        inkfs cp note.md notes/             # -> notes/note (copy).md
        inkfs cp -n drafts backup/          # dry run
    """
    fs = _get_fs(ctx)
    for src in sources:
        with _handle_errors():
            if dry_run:
                click.echo(fs.plan_copy(src, dest).final)
                continue
            result = fs.copy_file(src, dest)
        click.echo(result.target)
        _status(ctx, f"Copied {result.files} file(s) from {result.source}")


# ---------------------------------------------------------------------------
# rm
# ---------------------------------------------------------------------------

@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_context
def rm(ctx, paths):
    """Permanently delete files or whole directories."""
    fs = _get_fs(ctx)
    for path in paths:
        with _handle_errors():
            fs.delete_path(path)
        _status(ctx, f"Removed {path}")


# ---------------------------------------------------------------------------
# exists
# ---------------------------------------------------------------------------

@main.command()
@click.argument("path")
@click.pass_context
def exists(ctx, path):
    """Exit 0 if PATH exists, 1 otherwise."""
    ctx.exit(0 if _get_fs(ctx).path_exists(path) else 1)
