"""Shared CLI parameter utilities to reduce duplication.

Every command talks to the same bucket, so the connection options are defined
once here and reused in each command signature. Options left unset fall back
to the ``S3VFS_*`` environment settings.

Usage:
    @app.command()
    def my_command(
        bucket: BucketOption = None,
        region: RegionOption = None,
    ):
        pass
"""

from typing import Annotated, Optional

import typer

BucketOption = Annotated[
    Optional[str],
    typer.Option("--bucket", "-b", help="Bucket name (default: S3VFS_BUCKET_NAME)"),
]

RegionOption = Annotated[
    Optional[str],
    typer.Option("--region", help="AWS region name (default: S3VFS_AWS_REGION)"),
]

AccessKeyOption = Annotated[
    Optional[str],
    typer.Option("--access-key-id", help="AWS access key ID"),
]

SecretKeyOption = Annotated[
    Optional[str],
    typer.Option("--secret-access-key", help="AWS secret access key"),
]

EndpointUrlOption = Annotated[
    Optional[str],
    typer.Option("--endpoint-url", help="Custom S3 endpoint URL"),
]

ProfileOption = Annotated[
    Optional[str],
    typer.Option("--aws-profile", help="AWS CLI profile name"),
]

ExcludeOption = Annotated[
    Optional[str],
    typer.Option(
        "--exclude", help="Regular expression for keys to hide from listings"
    ),
]

PrefixOption = Annotated[
    str,
    typer.Option("--prefix", "-p", help="Folder to operate in, e.g. 'users/alice/'"),
]
