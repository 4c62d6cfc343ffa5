# acs/commands/lang.py

from typing import Optional

import typer
from rich.markup import escape

from acs.commands.common import CommandContext, create_context, run_guarded, select_one
from acs.core.exceptions import UnsupportedLanguageError
from acs.core.i18n import SUPPORTED_LANGUAGES, Translator, is_supported_language, language_display_name
from acs.core.models import Language

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def lang_command(ctx: CommandContext, language: Optional[str] = None) -> int:
    """Set the display language, prompting for it when not given."""
    config = ctx.store.load()
    current = config.language.value
    t = ctx.t

    if language is not None:
        if not is_supported_language(language):
            raise UnsupportedLanguageError(language, SUPPORTED_LANGUAGES)
        target = language
    else:
        labels = []
        for code in SUPPORTED_LANGUAGES:
            label = f"{language_display_name(code, t)} ({code})"
            if code == current:
                label += f" {t('lang.choiceCurrent')}"
            labels.append(escape(label))
        target = SUPPORTED_LANGUAGES[select_one(ctx, t("lang.prompt"), labels)]

    if target == current:
        ctx.console_awr.print(escape(t("lang.already", language=language_display_name(current, t))))
        return 0

    ctx.store.save(config.model_copy(update={"language": Language(target)}))

    updated = Translator(target)
    ctx.console_awr.success(updated("lang.updated", language=language_display_name(target, updated)))
    return 0

# ==============================================================
# COMMAND REGISTRATION
# ==============================================================

def register(app):
    """Register the lang command with the Typer app."""

    @app.command()
    def lang(
        language: Optional[str] = typer.Argument(None, help="zh, en or ja; prompted for when omitted."),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed output"),
    ):
        """Change the display language."""
        ctx = create_context(verbose)
        code = run_guarded(ctx, lambda: lang_command(ctx, language))
        if code:
            raise typer.Exit(code=code)
