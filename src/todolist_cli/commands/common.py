"""Helpers shared by the command modules."""

import typer

from todolist_cli.services.config_service import get_config_service
from todolist_cli.services.store_service import StoreService


def get_store_service(ctx: typer.Context) -> StoreService:
    """Build the store service for the path resolved for this invocation.

    The root callback puts the ``--file`` override on ``ctx.obj``; everything
    else comes from the config service.
    """
    override = (ctx.obj or {}).get("file")
    path = get_config_service().resolve_store_path(override)
    return StoreService(path)
