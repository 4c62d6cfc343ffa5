# acs/ui/routes.py

"""
JSON API of the admin server.

Every request re-reads the configuration through ``ConfigStore``; nothing is
kept in memory between requests. Responses use the envelope
``{"success": true, "data": ...}`` or ``{"success": false, "error": "..."}``.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Pattern, Tuple
from urllib.parse import unquote, urlsplit

from pydantic import ValidationError

from acs.core.claude import (
    AUTH_TOKEN_KEY,
    BASE_URL_KEY,
    ProfileApplier,
    add_profile,
    get_current_profile,
    remove_profile,
    switch_profile,
    update_profile,
)
from acs.core.config_store import ConfigStore
from acs.core.console import Console, ConsoleAware
from acs.core.exceptions import (
    AcsError,
    ClaudeNotConfiguredError,
    ConfigFormatError,
    ProfileExistsError,
    ProfileNotFoundError,
    ProjectPathError,
)
from acs.core.i18n import Translator, describe_error, resolve_language
from acs.core.models import ClaudeProfile, CliTool, Project
from acs.core.paths import resolve_project_dir


@dataclass
class ApiResponse:
    status: int
    payload: Dict[str, Any]


class ApiError(Exception):
    """A request the API rejects with a specific status."""
    def __init__(self, status: int, message: str, issues: Optional[List[str]] = None):
        self.status = status
        self.message = message
        self.issues = issues
        super().__init__(message)


def ok(data: Any, status: int = 200) -> ApiResponse:
    return ApiResponse(status, {"success": True, "data": data})


def fail(status: int, message: str, issues: Optional[List[str]] = None) -> ApiResponse:
    payload: Dict[str, Any] = {"success": False, "error": message}
    if issues:
        payload["issues"] = issues
    return ApiResponse(status, payload)


def parse_json_body(raw: bytes) -> Optional[Dict[str, Any]]:
    """The request body as a JSON object; None when empty, invalid or not an object."""
    if not raw or not raw.strip():
        return None
    try:
        value = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    return value if isinstance(value, dict) else None


def _text(body: Optional[Dict[str, Any]], key: str) -> str:
    value = body.get(key) if body else None
    return value.strip() if isinstance(value, str) else ""


def _parse_order(value: Any) -> Optional[int]:
    """Blank means "no order"; anything else must be a non-negative integer."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(value)
    if isinstance(value, int):
        order = value
    elif isinstance(value, str) and value.strip().isdigit():
        order = int(value.strip())
    else:
        raise ValueError(value)
    if order < 0:
        raise ValueError(value)
    return order


def _profile_view(name: str, profile: ClaudeProfile, is_current: bool) -> Dict[str, Any]:
    env = dict(profile.env or {})
    env.setdefault(BASE_URL_KEY, "-")
    env.setdefault(AUTH_TOKEN_KEY, "-")
    return {
        "name": name,
        "isCurrent": is_current,
        "env": env,
        "model": profile.model or "-",
    }

# ==============================================================
# ROUTER
# ==============================================================

Handler = Callable[..., ApiResponse]


class ApiRouter(ConsoleAware):
    """Maps ``(method, path)`` to the handler methods below."""

    def __init__(
        self,
        store: ConfigStore,
        applier: ProfileApplier,
        console: Optional[Console] = None,
        verbose: bool = False,
    ):
        super().__init__(console, verbose)
        self.store = store
        self.applier = applier
        self.routes: List[Tuple[str, Pattern[str], Handler]] = [
            ("GET", re.compile(r"/api/projects"), self.list_projects),
            ("POST", re.compile(r"/api/projects"), self.create_project),
            ("PUT", re.compile(r"/api/projects/(.+)"), self.update_project),
            ("DELETE", re.compile(r"/api/projects/(.+)"), self.delete_project),
            ("GET", re.compile(r"/api/cli"), self.list_cli),
            ("POST", re.compile(r"/api/cli"), self.create_cli),
            ("PUT", re.compile(r"/api/cli/(.+)"), self.update_cli),
            ("DELETE", re.compile(r"/api/cli/(.+)"), self.delete_cli),
            ("GET", re.compile(r"/api/config/claude/current"), self.current_profile),
            ("GET", re.compile(r"/api/config/claude/list"), self.list_profiles),
            ("POST", re.compile(r"/api/config/claude/use"), self.use_profile),
            ("POST", re.compile(r"/api/config/claude/add"), self.create_profile),
            ("PUT", re.compile(r"/api/config/claude/(.+)"), self.edit_profile),
            ("DELETE", re.compile(r"/api/config/claude/(.+)"), self.delete_profile),
        ]

    def dispatch(self, method: str, target: str, raw_body: bytes = b"") -> ApiResponse:
        """Route one request and turn acs errors into error responses."""
        path = urlsplit(target).path.rstrip("/") or "/"
        t = Translator(resolve_language(self.store.config_file))

        for route_method, pattern, handler in self.routes:
            match = pattern.fullmatch(path)
            if route_method != method or match is None:
                continue
            params = [unquote(group) for group in match.groups()]
            try:
                response = handler(t, parse_json_body(raw_body), *params)
            except ApiError as e:
                response = fail(e.status, e.message, e.issues)
            except AcsError as e:
                response = self._error_response(e, t)
            except Exception as e:
                self.error(f"{method} {path}: {e}")
                response = fail(500, t("errors.unexpected", message=str(e)))
            self.log(f"[bold magenta]api[/] → {method} {path} [cyan]{response.status}[/]")
            return response

        return fail(404, t("ui.api.notFound"))

    def _error_response(self, error: AcsError, t: Translator) -> ApiResponse:
        lines = describe_error(error, t, str(self.store.config_file))
        if isinstance(error, ProjectPathError):
            return fail(400, lines[0])
        if isinstance(error, ClaudeNotConfiguredError):
            return fail(404, t("ui.api.claudeMissing"))
        if isinstance(error, ProfileNotFoundError):
            return fail(404, lines[0])
        if isinstance(error, ProfileExistsError):
            return fail(409, t("ui.api.profileExists", name=error.name))
        if isinstance(error, ConfigFormatError):
            return fail(500, lines[0], lines[1:])
        return fail(500, lines[0])

    # ----------------------------------------------------------
    # PROJECTS
    # ----------------------------------------------------------

    def list_projects(self, t: Translator, body: Optional[Dict[str, Any]]) -> ApiResponse:
        config = self.store.load()
        return ok([project.model_dump(mode="json") for project in config.projects])

    def _project_from(self, t: Translator, body: Optional[Dict[str, Any]]) -> Project:
        name, path = _text(body, "name"), _text(body, "path")
        if not name or not path:
            raise ApiError(400, t("ui.api.missingFields", fields="name, path"))
        return Project(name=name, path=resolve_project_dir(path))

    def create_project(self, t: Translator, body: Optional[Dict[str, Any]]) -> ApiResponse:
        project = self._project_from(t, body)
        config = self.store.load()
        if config.find_project_conflicts(project.name, project.path):
            raise ApiError(409, t("ui.api.projectConflict"))

        self.store.save(config.model_copy(update={"projects": [*config.projects, project]}))
        self.log(f"[bold magenta]api[/] → added project [cyan]{project.name}[/]")
        return ok(project.model_dump(mode="json"), 201)

    def update_project(self, t: Translator, body: Optional[Dict[str, Any]], name: str) -> ApiResponse:
        project = self._project_from(t, body)
        config = self.store.load()
        index = next((i for i, p in enumerate(config.projects) if p.name == name), None)
        if index is None:
            raise ApiError(404, t("ui.api.projectNotFound", name=name))
        if config.find_project_conflicts(project.name, project.path, exclude=index):
            raise ApiError(409, t("ui.api.projectConflict"))

        projects = list(config.projects)
        projects[index] = project
        self.store.save(config.model_copy(update={"projects": projects}))
        self.log(f"[bold magenta]api[/] → updated project [cyan]{name}[/] → {project.name}")
        return ok(project.model_dump(mode="json"))

    def delete_project(self, t: Translator, body: Optional[Dict[str, Any]], name: str) -> ApiResponse:
        config = self.store.load()
        remaining = [p for p in config.projects if p.name != name]
        if len(remaining) == len(config.projects):
            raise ApiError(404, t("ui.api.projectNotFound", name=name))

        self.store.save(config.model_copy(update={"projects": remaining}))
        self.log(f"[bold magenta]api[/] → removed project [cyan]{name}[/]")
        return ok({"name": name})

    # ----------------------------------------------------------
    # CLI TOOLS
    # ----------------------------------------------------------

    def list_cli(self, t: Translator, body: Optional[Dict[str, Any]]) -> ApiResponse:
        config = self.store.load()
        return ok([tool.model_dump(mode="json") for tool in config.cli])

    def _tool_from(self, t: Translator, body: Optional[Dict[str, Any]], current: Optional[CliTool] = None) -> CliTool:
        name, command = _text(body, "name"), _text(body, "command")
        if not name or not command:
            raise ApiError(400, t("ui.api.missingFields", fields="name, command"))
        if body is not None and "order" in body:
            try:
                order = _parse_order(body["order"])
            except ValueError:
                raise ApiError(400, t("ui.api.invalidOrder")) from None
        else:
            order = current.order if current else None
        return CliTool(name=name, command=command, order=order)

    def create_cli(self, t: Translator, body: Optional[Dict[str, Any]]) -> ApiResponse:
        tool = self._tool_from(t, body)
        config = self.store.load()
        if config.find_cli_conflicts(tool.name, tool.command):
            raise ApiError(409, t("ui.api.cliConflict"))

        self.store.save(config.model_copy(update={"cli": [*config.cli, tool]}))
        self.log(f"[bold magenta]api[/] → added CLI [cyan]{tool.name}[/]")
        return ok(tool.model_dump(mode="json"), 201)

    def update_cli(self, t: Translator, body: Optional[Dict[str, Any]], name: str) -> ApiResponse:
        config = self.store.load()
        index = next((i for i, tool in enumerate(config.cli) if tool.name == name), None)
        if index is None:
            raise ApiError(404, t("ui.api.cliNotFound", name=name))
        tool = self._tool_from(t, body, config.cli[index])
        if config.find_cli_conflicts(tool.name, tool.command, exclude=index):
            raise ApiError(409, t("ui.api.cliConflict"))

        tools = list(config.cli)
        tools[index] = tool
        self.store.save(config.model_copy(update={"cli": tools}))
        self.log(f"[bold magenta]api[/] → updated CLI [cyan]{name}[/] → {tool.name}")
        return ok(tool.model_dump(mode="json"))

    def delete_cli(self, t: Translator, body: Optional[Dict[str, Any]], name: str) -> ApiResponse:
        config = self.store.load()
        remaining = [tool for tool in config.cli if tool.name != name]
        if len(remaining) == len(config.cli):
            raise ApiError(404, t("ui.api.cliNotFound", name=name))

        self.store.save(config.model_copy(update={"cli": remaining}))
        self.log(f"[bold magenta]api[/] → removed CLI [cyan]{name}[/]")
        return ok({"name": name})

    # ----------------------------------------------------------
    # CLAUDE PROFILES
    # ----------------------------------------------------------

    def current_profile(self, t: Translator, body: Optional[Dict[str, Any]]) -> ApiResponse:
        current = get_current_profile(self.store.load())
        if current is None:
            return ok(None)
        name, profile = current
        return ok(_profile_view(name, profile, True))

    def list_profiles(self, t: Translator, body: Optional[Dict[str, Any]]) -> ApiResponse:
        config = self.store.load()
        claude = config.config.claude
        current = claude.current if claude else None
        return ok([
            _profile_view(name, profile, name == current)
            for name, profile in config.claude_profiles().items()
        ])

    def use_profile(self, t: Translator, body: Optional[Dict[str, Any]]) -> ApiResponse:
        name = _text(body, "profile")
        if not name:
            raise ApiError(400, t("ui.api.missingFields", fields="profile"))
        settings_path = switch_profile(self.store, self.applier, name)
        self.log(f"[bold magenta]api[/] → switched Claude profile to [cyan]{name}[/] ({settings_path})")
        return ok({"profile": name})

    def _profile_from(self, t: Translator, body: Optional[Dict[str, Any]]) -> ClaudeProfile:
        raw = body.get("profile") if body else None
        if not isinstance(raw, dict):
            raise ApiError(400, t("ui.api.missingFields", fields="profile"))
        try:
            return ClaudeProfile.model_validate(raw)
        except ValidationError as e:
            issues = [
                t("errors.config.issue", path=".".join(str(part) for part in item["loc"]), message=item["msg"])
                for item in e.errors()
            ]
            raise ApiError(400, issues[0], issues) from e

    def create_profile(self, t: Translator, body: Optional[Dict[str, Any]]) -> ApiResponse:
        name = _text(body, "name")
        if not name:
            raise ApiError(400, t("ui.api.missingFields", fields="name, profile"))
        add_profile(self.store, name, self._profile_from(t, body))
        self.log(f"[bold magenta]api[/] → added Claude profile [cyan]{name}[/]")
        return ok({"name": name}, 201)

    def edit_profile(self, t: Translator, body: Optional[Dict[str, Any]], name: str) -> ApiResponse:
        update_profile(self.store, name, self._profile_from(t, body))
        self.log(f"[bold magenta]api[/] → updated Claude profile [cyan]{name}[/]")
        return ok({"name": name})

    def delete_profile(self, t: Translator, body: Optional[Dict[str, Any]], name: str) -> ApiResponse:
        remove_profile(self.store, name)
        self.log(f"[bold magenta]api[/] → removed Claude profile [cyan]{name}[/]")
        return ok({"name": name})
