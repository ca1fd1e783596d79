"""Command-line interface for s3-vfs.

This module provides a folder-style CLI over a single S3 bucket.

Commands:
    - ls: List the sub-folders and files of a folder
    - mkdir: Create a folder
    - seed: Create the default folders missing under a folder
    - rm: Delete a file or a folder with everything in it
    - cp: Copy a file, or a folder when the source ends in '/'
    - mv: Rename a file or folder in place
    - upload: Upload a local file into a folder

Connection options default to the S3VFS_* environment settings.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    AccessKeyOption,
    BucketOption,
    EndpointUrlOption,
    ExcludeOption,
    PrefixOption,
    ProfileOption,
    RegionOption,
    SecretKeyOption,
)
from .core import settings
from .filesystem import S3FileSystem

app = typer.Typer(
    name="s3vfs",
    help="Browse and manage an S3 bucket as folders and files.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-vfs {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    S3-VFS: folders, uploads, renames and recursive deletes on one S3 bucket.
    """
    pass


def _create_filesystem(
    bucket: Optional[str] = None,
    region: Optional[str] = None,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    aws_profile: Optional[str] = None,
    exclude: Optional[str] = None,
) -> S3FileSystem:
    """Create a filesystem from command options layered over settings."""
    overrides = {
        "bucket_name": bucket,
        "aws_region": region,
        "aws_access_key_id": access_key_id,
        "aws_secret_access_key": secret_access_key,
        "endpoint_url": endpoint_url,
        "aws_profile": aws_profile,
        "exclude_pattern": exclude,
    }
    effective = settings.model_copy(
        update={name: value for name, value in overrides.items() if value is not None}
    )
    return S3FileSystem.from_settings(effective)


def _human_size(size: int) -> str:
    if size >= 1024**3:
        return f"{size / (1024**3):.2f} GB"
    elif size >= 1024**2:
        return f"{size / (1024**2):.2f} MB"
    elif size >= 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size} bytes"


@app.command("ls")
def list_cmd(
    prefix: Annotated[str, typer.Argument(help="Folder to list")] = "",
    urls: Annotated[bool, typer.Option("--urls", help="Show object URLs")] = False,
    bucket: BucketOption = None,
    region: RegionOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: ProfileOption = None,
    exclude: ExcludeOption = None,
) -> None:
    """
    List the sub-folders and files directly inside a folder.

    Examples:
        s3vfs ls
        s3vfs ls "users/alice/" --bucket family-documents
    """
    try:
        fs = _create_filesystem(
            bucket, region, access_key_id, secret_access_key, endpoint_url,
            aws_profile, exclude,
        )
        contents = fs.list_contents(prefix)

        if not contents.folders and not contents.objects:
            typer.echo("Empty folder.")
        for folder in contents.folders:
            typer.echo(f"  {folder.name}/")
        for obj in contents.objects:
            line = f"  {obj.name}  {_human_size(obj.size)}"
            if obj.last_modified:
                line += f"  {obj.last_modified.isoformat()}"
            if urls:
                line += f"  {obj.url}"
            typer.echo(line)
        if contents.truncated:
            typer.echo("(more entries not shown)")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("mkdir")
def mkdir_cmd(
    name: Annotated[str, typer.Argument(help="Name of the new folder")],
    prefix: PrefixOption = "",
    bucket: BucketOption = None,
    region: RegionOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: ProfileOption = None,
) -> None:
    """
    Create a folder.

    Examples:
        s3vfs mkdir "Tax returns" --prefix "users/alice/"
    """
    try:
        fs = _create_filesystem(
            bucket, region, access_key_id, secret_access_key, endpoint_url, aws_profile
        )
        key = fs.create_folder(name, prefix)
        typer.echo(f"Created {key}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("seed")
def seed_cmd(
    prefix: PrefixOption = "",
    bucket: BucketOption = None,
    region: RegionOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: ProfileOption = None,
) -> None:
    """
    Create any default folder missing under a folder.

    Examples:
        s3vfs seed --prefix "users/alice/"
    """
    try:
        fs = _create_filesystem(
            bucket, region, access_key_id, secret_access_key, endpoint_url, aws_profile
        )
        created = fs.ensure_default_folders(prefix)
        if created:
            for key in created:
                typer.echo(f"Created {key}")
        else:
            typer.echo("All default folders already exist.")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("rm")
def remove_cmd(
    key: Annotated[str, typer.Argument(help="File key or folder prefix to delete")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")
    ] = False,
    bucket: BucketOption = None,
    region: RegionOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: ProfileOption = None,
) -> None:
    """
    Delete every object whose key starts with KEY.

    Examples:
        s3vfs rm "users/alice/Old stuff/" --yes
    """
    if not yes:
        typer.confirm(f"Delete everything under '{key}'?", abort=True)
    try:
        fs = _create_filesystem(
            bucket, region, access_key_id, secret_access_key, endpoint_url, aws_profile
        )
        deleted = fs.delete(key)
        typer.echo(f"Deleted {deleted:,} objects")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("cp")
def copy_cmd(
    source: Annotated[str, typer.Argument(help="Source key; end with '/' for a folder")],
    destination: Annotated[str, typer.Argument(help="Destination key or prefix")],
    bucket: BucketOption = None,
    region: RegionOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: ProfileOption = None,
) -> None:
    """
    Copy a file, or a whole folder when SOURCE ends in '/'.

    Examples:
        s3vfs cp "users/alice/Legal documents/" "users/bob/Legal documents/"
    """
    try:
        fs = _create_filesystem(
            bucket, region, access_key_id, secret_access_key, endpoint_url, aws_profile
        )
        copied = fs.copy(source, destination)
        typer.echo(f"Copied {copied:,} objects")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("mv")
def rename_cmd(
    old_name: Annotated[str, typer.Argument(help="Current name inside the folder")],
    new_name: Annotated[str, typer.Argument(help="New name inside the folder")],
    folder: Annotated[
        bool, typer.Option("--folder", help="Names refer to a folder")
    ] = False,
    prefix: PrefixOption = "",
    bucket: BucketOption = None,
    region: RegionOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: ProfileOption = None,
) -> None:
    """
    Rename a file or folder within a folder.

    Examples:
        s3vfs mv draft.txt final.txt --prefix "users/alice/"
        s3vfs mv Receipts "Bills & Receipts" --folder --prefix "users/alice/"
    """
    try:
        fs = _create_filesystem(
            bucket, region, access_key_id, secret_access_key, endpoint_url, aws_profile
        )
        new_key = fs.rename(old_name, new_name, is_folder=folder, current_prefix=prefix)
        if new_key is None:
            typer.echo("Nothing to rename.")
        else:
            typer.echo(f"Renamed to {new_key}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("upload")
def upload_cmd(
    path: Annotated[
        Path, typer.Argument(help="Local file to upload", exists=True, dir_okay=False)
    ],
    prefix: PrefixOption = "",
    bucket: BucketOption = None,
    region: RegionOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: ProfileOption = None,
) -> None:
    """
    Upload a local file into a folder under its own name.

    Examples:
        s3vfs upload ./will.pdf --prefix "users/alice/Legal documents/"
    """
    try:
        fs = _create_filesystem(
            bucket, region, access_key_id, secret_access_key, endpoint_url, aws_profile
        )
        fs.upload_path(path, prefix)
        typer.echo(f"Uploaded {path.name} to {prefix}{path.name}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
