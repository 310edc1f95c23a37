"""
Commandes CLI de gestion des incidences (list, show, create, update, delete).
"""

from datetime import date, datetime
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from myhome.adapters.cli.helpers import console, load_uploads, suppress_loguru, with_container
from myhome.core.entities import UserIdentity
from myhome.core.exceptions import IncidenceError
from myhome.core.value_objects import Page, PageRequest
from myhome.services.dto import IncidenceRequest, IncidenceSummary


# Application Typer pour les commandes incidences
incidences_app = typer.Typer(
    name="incidences",
    help="Gestion des incidences (tickets de maintenance)",
    rich_markup_mode="rich",
)

_DATE_FORMATS = ["%Y-%m-%d"]


def _to_date(value: Optional[datetime]) -> Optional[date]:
    return value.date() if value else None


def _fail(error: IncidenceError) -> NoReturn:
    console.print(f"[red]Erreur:[/red] {error}")
    raise typer.Exit(code=1)


def _render_page(page: Page[IncidenceSummary]) -> Table:
    """Construit le tableau Rich d'une page d'incidences."""
    table = Table(
        title=f"Incidences - page {page.page + 1}/{max(page.total_pages, 1)} ({page.total} au total)"
    )
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Titre")
    table.add_column("Statut")
    table.add_column("Priorite")
    table.add_column("Debut")
    table.add_column("Photos", justify="right")
    for item in page.items:
        table.add_row(
            item.id or "-",
            item.title,
            item.status or "-",
            item.priority or "-",
            item.start_date.isoformat() if item.start_date else "-",
            str(item.photo_count),
        )
    return table


def _render_summary(summary: IncidenceSummary) -> Panel:
    """Construit le panneau Rich detaillant une incidence."""
    lines = [
        f"[bold]{summary.title}[/bold]",
        summary.description or "[dim]Pas de description[/dim]",
        "",
        f"Statut : {summary.status or '-'}    Priorite : {summary.priority or '-'}",
        f"Debut : {summary.start_date or '-'}    Fin : {summary.end_date or '-'}",
    ]
    if summary.longitude is not None and summary.latitude is not None:
        lines.append(f"Position : {summary.longitude}, {summary.latitude}")
    if summary.organization_id:
        lines.append(f"Organisation : {summary.organization_name} (#{summary.organization_id})")
    if summary.employee_id:
        lines.append(f"Employe : {summary.employee_name} (#{summary.employee_id})")
    lines.append(f"Photos : {summary.photo_count}")
    for photo in summary.photos:
        lines.append(f"  - #{photo.id} {photo.file_name} -> {photo.storage_path}")
    return Panel("\n".join(lines), title=f"Incidence #{summary.id}")


@incidences_app.command("list")
def list_incidences(
    page: Annotated[int, typer.Option("--page", "-p", min=1, help="Numero de page")] = 1,
    size: Annotated[Optional[int], typer.Option("--size", "-s", min=1, help="Taille de page")] = None,
    sort: Annotated[Optional[str], typer.Option("--sort", help="Champ de tri")] = None,
    desc: Annotated[bool, typer.Option("--desc", help="Tri decroissant")] = False,
) -> None:
    """Liste les incidences page par page."""
    _list_incidences(page, size, sort, desc)


@with_container()
def _list_incidences(
    container, page: int, size: Optional[int], sort: Optional[str], desc: bool
) -> None:
    service = container.incidence_service()
    page_size = size or container.config().default_page_size
    try:
        with suppress_loguru():
            result = service.list_page(
                PageRequest(page=page - 1, size=page_size, sort_by=sort, descending=desc)
            )
    except IncidenceError as e:
        _fail(e)
    console.print(_render_page(result))


@incidences_app.command("show")
def show_incidence(
    incidence_id: Annotated[str, typer.Argument(help="ID de l'incidence")],
    user: Annotated[
        Optional[str], typer.Option("--user", "-u", help="Login de l'appelant")
    ] = None,
    authority: Annotated[
        Optional[list[str]],
        typer.Option("--authority", "-a", help="Autorite de l'appelant (repetable)"),
    ] = None,
) -> None:
    """Affiche une incidence, photos comprises selon les autorites de l'appelant."""
    _show_incidence(incidence_id, user, authority or [])


@with_container()
def _show_incidence(
    container, incidence_id: str, user: Optional[str], authorities: list[str]
) -> None:
    service = container.incidence_service()
    identity = UserIdentity(login=user, authorities=frozenset(authorities)) if user else None

    with suppress_loguru(), container.user_resolver().as_user(identity):
        summary = service.get_by_id_with_visibility(incidence_id)

    if summary is None:
        console.print(f"[yellow]Incidence introuvable: {incidence_id}[/yellow]")
        raise typer.Exit(code=1)
    console.print(_render_summary(summary))


@incidences_app.command("create")
def create_incidence(
    title: Annotated[str, typer.Option("--title", "-t", help="Titre")],
    description: Annotated[Optional[str], typer.Option(help="Description")] = None,
    start_date: Annotated[
        Optional[datetime], typer.Option(formats=_DATE_FORMATS, help="Date de debut")
    ] = None,
    end_date: Annotated[
        Optional[datetime], typer.Option(formats=_DATE_FORMATS, help="Date de fin")
    ] = None,
    status: Annotated[Optional[str], typer.Option(help="Statut")] = "OPEN",
    priority: Annotated[Optional[str], typer.Option(help="Priorite")] = "MEDIUM",
    longitude: Annotated[Optional[float], typer.Option(help="Longitude")] = None,
    latitude: Annotated[Optional[float], typer.Option(help="Latitude")] = None,
    organization: Annotated[Optional[str], typer.Option(help="ID de l'organisation")] = None,
    employee: Annotated[Optional[str], typer.Option(help="ID de l'employe")] = None,
    photo: Annotated[
        Optional[list[Path]],
        typer.Option(exists=True, dir_okay=False, readable=True, help="Photo (repetable)"),
    ] = None,
    incidence_id: Annotated[
        Optional[str], typer.Option("--id", help="ID pre-attribue")
    ] = None,
) -> None:
    """Cree une incidence avec ses photos."""
    request = IncidenceRequest(
        id=incidence_id,
        title=title,
        description=description,
        start_date=_to_date(start_date),
        end_date=_to_date(end_date),
        status=status,
        priority=priority,
        longitude=longitude,
        latitude=latitude,
        organization_id=organization,
        employee_id=employee,
        photo_files=load_uploads(photo or []),
    )
    _create_incidence(request)


@with_container()
def _create_incidence(container, request: IncidenceRequest) -> None:
    service = container.incidence_service()
    try:
        incidence = service.create(request)
    except IncidenceError as e:
        _fail(e)
    console.print(
        f"[green]Incidence creee:[/green] #{incidence.id} "
        f"({len(incidence.photos)} photo(s))"
    )


@incidences_app.command("update")
def update_incidence(
    incidence_id: Annotated[str, typer.Argument(help="ID de l'incidence")],
    title: Annotated[str, typer.Option("--title", "-t", help="Titre")],
    description: Annotated[Optional[str], typer.Option(help="Description")] = None,
    start_date: Annotated[
        Optional[datetime], typer.Option(formats=_DATE_FORMATS, help="Date de debut")
    ] = None,
    end_date: Annotated[
        Optional[datetime], typer.Option(formats=_DATE_FORMATS, help="Date de fin")
    ] = None,
    status: Annotated[Optional[str], typer.Option(help="Statut")] = None,
    priority: Annotated[Optional[str], typer.Option(help="Priorite")] = None,
    longitude: Annotated[Optional[float], typer.Option(help="Longitude")] = None,
    latitude: Annotated[Optional[float], typer.Option(help="Latitude")] = None,
) -> None:
    """Remplace les champs descriptifs d'une incidence (liens et photos conserves)."""
    request = IncidenceRequest(
        id=incidence_id,
        title=title,
        description=description,
        start_date=_to_date(start_date),
        end_date=_to_date(end_date),
        status=status,
        priority=priority,
        longitude=longitude,
        latitude=latitude,
    )
    _update_incidence(request)


@with_container()
def _update_incidence(container, request: IncidenceRequest) -> None:
    service = container.incidence_service()
    try:
        summary = service.update(request)
    except IncidenceError as e:
        _fail(e)
    if summary is None:
        console.print(f"[yellow]Incidence introuvable: {request.id}[/yellow]")
        raise typer.Exit(code=1)
    console.print(_render_summary(summary))


@incidences_app.command("delete")
def delete_incidence(
    incidence_id: Annotated[str, typer.Argument(help="ID de l'incidence")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Ne pas demander de confirmation")] = False,
) -> None:
    """Supprime une incidence et ses photos."""
    if not yes and not typer.confirm(f"Supprimer l'incidence {incidence_id} ?"):
        raise typer.Exit(code=0)
    _delete_incidence(incidence_id)


@with_container()
def _delete_incidence(container, incidence_id: str) -> None:
    service = container.incidence_service()
    try:
        service.delete(incidence_id)
    except IncidenceError as e:
        _fail(e)
    console.print(f"[green]Incidence supprimee:[/green] #{incidence_id}")
