# acs/core/i18n.py

"""
Message catalogs and the translator used for all user-facing text.

Templates use ``{name}`` placeholders. A key missing from a language falls
back to the Chinese catalog and then to the key itself.
"""

import string
from pathlib import Path
from typing import Any, Dict, List, Optional

from acs.core.exceptions import (
    AcsError,
    ClaudeNotConfiguredError,
    ConfigFormatError,
    ConfigReadError,
    ConfigWriteError,
    ProfileNotFoundError,
    ProjectPathError,
    RuleSourceError,
    UnsupportedCliError,
    UnsupportedLanguageError,
)
from acs.core.file_io import read_json
from acs.core.models import DEFAULT_LANGUAGE, Language
from acs.core.paths import format_path_for_display

MESSAGES: Dict[str, Dict[str, str]] = {
    "zh": {
        "errors.unexpected": "意外错误：{message}",
        "errors.cancelled": "操作已被用户取消。",
        "errors.failed": "命令执行失败：{message}",
        "errors.config.readFailed": "配置文件 {path} 无法读取，请手动检查",
        "errors.config.invalid": "配置文件 {path} 格式错误：",
        "errors.config.issue": "{path}: {message}",
        "errors.config.rootPath": "配置根",
        "errors.config.writeFailed": "写入 {path} 失败：{message}",
        "select.invalid": "请输入列表中的编号",
        "select.multiHint": "（多个编号用逗号分隔）",
        "list.empty": "暂无项目。可通过 `acs add` 添加新的项目。",
        "list.summary": "共 {count} 个项目：",
        "list.entry": "{index}. {name} -> {path}",
        "list.debugCount": "当前配置包含 {count} 条记录",
        "add.promptPath": "请输入项目路径",
        "add.validate.notExists": "路径不存在：{path}",
        "add.validate.notDirectory": "目标不是目录：{path}",
        "add.duplicatePath": "该路径已存在于配置中，确定仍要重复添加吗？",
        "add.duplicateName": "存在同名项目，是否继续？",
        "add.cancelled": "已取消添加操作",
        "add.success": "添加成功：{name} -> {path}",
        "edit.none": "当前没有可编辑的项目",
        "edit.promptSelect": "选择要编辑的项目",
        "edit.promptPath": "项目路径",
        "edit.promptName": "项目名称",
        "edit.validateName": "项目名称不能为空",
        "edit.noChanges": "未检测到变更",
        "edit.duplicatePath": "其他项目已使用该路径，是否继续？",
        "edit.duplicateName": "其他项目已使用该名称，是否继续？",
        "edit.cancelled": "已取消编辑操作",
        "edit.success": "已更新项目：{name} -> {path}",
        "edit.debugUpdated": "{previousName}({previousPath}) -> {name}({path})",
        "remove.none": "当前没有可删除的项目",
        "remove.promptSelect": "选择要删除的项目",
        "remove.promptConfirm": "确认删除 {count} 个项目吗？",
        "remove.cancelledNoSelection": "未选择任何项目，操作已取消",
        "remove.cancelled": "已取消删除操作",
        "remove.success": "已删除 {count} 个项目：{names}",
        "remove.debugDetails": "删除的项目详情：{details}",
        "code.noProjects": "当前没有项目，请先通过 `acs add` 添加。",
        "code.noCli": "CLI 列表为空，请编辑 {path} 添加可用 CLI。",
        "code.noAvailableProjects": "所有项目的路径都不存在",
        "code.promptProject": "选择需要进入的项目",
        "code.promptCli": "选择要运行的 CLI",
        "code.execute": "将在 {project} 中执行 {cli}",
        "code.projectMissingSuffix": " [路径不存在]",
        "spawn.verbose": "执行命令：{command} @ {location}",
        "spawn.exitCode": "{command} 退出码：{code}",
        "cli.list.empty": "CLI 列表为空。可通过 `acs cli add` 添加。",
        "cli.list.summary": "共 {count} 个 CLI 工具：",
        "cli.list.entry": "{index}. {name} -> {command}",
        "cli.promptName": "CLI 名称",
        "cli.promptCommand": "执行命令",
        "cli.promptOrder": "排序（非负整数）",
        "cli.validateName": "CLI 名称不能为空",
        "cli.validateCommand": "CLI 命令不能为空",
        "cli.validateOrder": "排序必须是非负整数",
        "cli.duplicateName": "已存在同名 CLI，是否继续？",
        "cli.duplicateCommand": "已存在相同命令的 CLI，是否继续？",
        "cli.add.cancelled": "已取消添加 CLI",
        "cli.add.success": "已添加 CLI：{name} ({command})",
        "cli.edit.none": "当前没有可编辑的 CLI",
        "cli.edit.promptSelect": "选择要编辑的 CLI",
        "cli.edit.noChanges": "未检测到变更",
        "cli.edit.cancelled": "已取消编辑 CLI",
        "cli.edit.success": "已更新 CLI：{name} ({command})",
        "cli.remove.none": "当前没有可删除的 CLI",
        "cli.remove.promptSelect": "选择要删除的 CLI",
        "cli.remove.confirm": "确认删除 {name} 吗？",
        "cli.remove.cancelled": "已取消删除 CLI",
        "cli.remove.success": "已删除 CLI：{name}",
        "config.claude.notConfigured": "尚未配置 Claude，请先在 {path} 中添加 config.claude",
        "config.claude.currentUnset": "尚未设置当前 Claude 配置",
        "config.claude.currentMissing": "当前配置 {name} 不存在",
        "config.claude.currentTitle": "当前 Claude 配置：{name}",
        "config.claude.noProfiles": "暂无 Claude 配置",
        "config.claude.listHeader": "Claude 配置共 {count} 个：",
        "config.claude.profileNotFound": "未找到配置：{name}",
        "config.claude.use.updated": "已切换 Claude 配置：{name}",
        "config.claude.use.settingsPath": "已写入 {path}",
        "lang.prompt": "选择 CLI 显示语言",
        "lang.invalid": "不支持的语言：{input}。可选值：{supported}",
        "lang.already": "当前已使用 {language}",
        "lang.updated": "语言已切换为 {language}",
        "lang.choiceCurrent": "（当前）",
        "language.zh": "中文",
        "language.en": "英语",
        "language.ja": "日语",
        "rules.unsupported": "不支持的 CLI 工具：{command}",
        "rules.sourceMissing": "规则源文件不存在：{path}",
        "rules.written": "规则文件已写入：{path}",
        "rules.backup": "原内容已备份至 {path}",
        "ui.server.running": "管理界面已启动：{url}",
        "ui.server.opening": "正在打开浏览器：{url}",
        "ui.server.openFailed": "无法自动打开浏览器（{message}），请手动访问 {url}",
        "ui.server.portInUse": "端口 {port} 已被占用",
        "ui.server.invalidPort": "无效的端口：{port}",
        "ui.server.failed": "管理界面启动失败：{message}",
        "ui.server.stopHint": "按 Ctrl+C 停止服务",
        "ui.server.stopped": "管理界面已停止",
        "ui.page.title": "acs 管理界面",
        "ui.page.projects": "项目",
        "ui.page.cli": "CLI 工具",
        "ui.page.profiles": "Claude 配置",
        "ui.page.name": "名称",
        "ui.page.path": "路径",
        "ui.page.command": "命令",
        "ui.page.order": "排序",
        "ui.page.model": "模型",
        "ui.page.add": "添加",
        "ui.page.delete": "删除",
        "ui.page.use": "启用",
        "ui.page.current": "当前",
        "ui.page.edit": "编辑",
        "ui.page.save": "保存",
        "ui.page.cancel": "取消",
        "ui.page.actions": "操作",
        "ui.page.empty": "暂无数据",
        "ui.page.baseUrl": "Base URL",
        "ui.page.token": "Token",
        "ui.page.confirmDelete": "确定删除 {name} 吗？",
        "ui.page.saved": "已保存",
        "ui.api.missingFields": "缺少必要的参数: {fields}",
        "ui.api.invalidOrder": "order 必须是非负整数",
        "ui.api.projectNotFound": "项目不存在：{name}",
        "ui.api.projectConflict": "项目名称或路径已存在",
        "ui.api.cliNotFound": "工具不存在：{name}",
        "ui.api.cliConflict": "工具名称或命令已存在",
        "ui.api.claudeMissing": "Claude 配置不存在",
        "ui.api.profileExists": "配置名称已存在：{name}",
        "ui.api.notFound": "未找到 API 端点",
        "ui.api.badLength": "无效的 Content-Length 请求头",
    },
    "en": {
        "errors.unexpected": "Unexpected error: {message}",
        "errors.cancelled": "Operation cancelled by user.",
        "errors.failed": "Command failed: {message}",
        "errors.config.readFailed": "Cannot read configuration file {path}, please check it manually",
        "errors.config.invalid": "Configuration file {path} has an invalid format:",
        "errors.config.issue": "{path}: {message}",
        "errors.config.rootPath": "<root>",
        "errors.config.writeFailed": "Failed to write {path}: {message}",
        "select.invalid": "Please enter a number from the list",
        "select.multiHint": "(comma-separated numbers)",
        "list.empty": "No projects yet. Use `acs add` to register one.",
        "list.summary": "{count} project(s):",
        "list.entry": "{index}. {name} -> {path}",
        "list.debugCount": "The configuration holds {count} record(s)",
        "add.promptPath": "Project path",
        "add.validate.notExists": "Path does not exist: {path}",
        "add.validate.notDirectory": "Not a directory: {path}",
        "add.duplicatePath": "This path is already registered. Add it again anyway?",
        "add.duplicateName": "A project with the same name exists. Continue?",
        "add.cancelled": "Add cancelled",
        "add.success": "Added: {name} -> {path}",
        "edit.none": "There are no projects to edit",
        "edit.promptSelect": "Select the project to edit",
        "edit.promptPath": "Project path",
        "edit.promptName": "Project name",
        "edit.validateName": "Project name must not be empty",
        "edit.noChanges": "No changes detected",
        "edit.duplicatePath": "Another project already uses this path. Continue?",
        "edit.duplicateName": "Another project already uses this name. Continue?",
        "edit.cancelled": "Edit cancelled",
        "edit.success": "Updated: {name} -> {path}",
        "edit.debugUpdated": "{previousName}({previousPath}) -> {name}({path})",
        "remove.none": "There are no projects to remove",
        "remove.promptSelect": "Select the projects to remove",
        "remove.promptConfirm": "Remove {count} project(s)?",
        "remove.cancelledNoSelection": "Nothing selected, operation cancelled",
        "remove.cancelled": "Remove cancelled",
        "remove.success": "Removed {count} project(s): {names}",
        "remove.debugDetails": "Removed project details: {details}",
        "code.noProjects": "No projects yet. Use `acs add` first.",
        "code.noCli": "The CLI list is empty. Edit {path} to add CLI tools.",
        "code.noAvailableProjects": "None of the registered project paths exist",
        "code.promptProject": "Select a project",
        "code.promptCli": "Select the CLI to run",
        "code.execute": "Running {cli} in {project}",
        "code.projectMissingSuffix": " [path missing]",
        "spawn.verbose": "Running: {command} @ {location}",
        "spawn.exitCode": "{command} exited with code {code}",
        "cli.list.empty": "The CLI list is empty. Use `acs cli add` to add one.",
        "cli.list.summary": "{count} CLI tool(s):",
        "cli.list.entry": "{index}. {name} -> {command}",
        "cli.promptName": "CLI name",
        "cli.promptCommand": "Command",
        "cli.promptOrder": "Order (non-negative integer)",
        "cli.validateName": "CLI name must not be empty",
        "cli.validateCommand": "CLI command must not be empty",
        "cli.validateOrder": "Order must be a non-negative integer",
        "cli.duplicateName": "A CLI with the same name exists. Continue?",
        "cli.duplicateCommand": "A CLI with the same command exists. Continue?",
        "cli.add.cancelled": "Add cancelled",
        "cli.add.success": "Added CLI: {name} ({command})",
        "cli.edit.none": "There are no CLI tools to edit",
        "cli.edit.promptSelect": "Select the CLI to edit",
        "cli.edit.noChanges": "No changes detected",
        "cli.edit.cancelled": "Edit cancelled",
        "cli.edit.success": "Updated CLI: {name} ({command})",
        "cli.remove.none": "There are no CLI tools to remove",
        "cli.remove.promptSelect": "Select the CLI to remove",
        "cli.remove.confirm": "Remove {name}?",
        "cli.remove.cancelled": "Remove cancelled",
        "cli.remove.success": "Removed CLI: {name}",
        "config.claude.notConfigured": "Claude is not configured yet. Add config.claude to {path}",
        "config.claude.currentUnset": "No current Claude profile is set",
        "config.claude.currentMissing": "The current profile {name} does not exist",
        "config.claude.currentTitle": "Current Claude profile: {name}",
        "config.claude.noProfiles": "There are no Claude profiles",
        "config.claude.listHeader": "{count} Claude profile(s):",
        "config.claude.profileNotFound": "Profile not found: {name}",
        "config.claude.use.updated": "Switched Claude profile to {name}",
        "config.claude.use.settingsPath": "Wrote {path}",
        "lang.prompt": "Select the CLI language",
        "lang.invalid": "Unsupported language: {input}. Supported: {supported}",
        "lang.already": "Already using {language}",
        "lang.updated": "Language switched to {language}",
        "lang.choiceCurrent": "(current)",
        "language.zh": "Chinese",
        "language.en": "English",
        "language.ja": "Japanese",
        "rules.unsupported": "Unsupported CLI tool: {command}",
        "rules.sourceMissing": "Rule source file not found: {path}",
        "rules.written": "Rule file written: {path}",
        "rules.backup": "Previous content backed up to {path}",
        "ui.server.running": "Admin UI running at {url}",
        "ui.server.opening": "Opening browser: {url}",
        "ui.server.openFailed": "Could not open a browser ({message}), visit {url} manually",
        "ui.server.portInUse": "Port {port} is already in use",
        "ui.server.invalidPort": "Invalid port: {port}",
        "ui.server.failed": "Admin UI failed to start: {message}",
        "ui.server.stopHint": "Press Ctrl+C to stop",
        "ui.server.stopped": "Admin UI stopped",
        "ui.page.title": "acs admin",
        "ui.page.projects": "Projects",
        "ui.page.cli": "CLI tools",
        "ui.page.profiles": "Claude profiles",
        "ui.page.name": "Name",
        "ui.page.path": "Path",
        "ui.page.command": "Command",
        "ui.page.order": "Order",
        "ui.page.model": "Model",
        "ui.page.add": "Add",
        "ui.page.delete": "Delete",
        "ui.page.use": "Use",
        "ui.page.current": "current",
        "ui.page.edit": "Edit",
        "ui.page.save": "Save",
        "ui.page.cancel": "Cancel",
        "ui.page.actions": "Actions",
        "ui.page.empty": "Nothing here yet",
        "ui.page.baseUrl": "Base URL",
        "ui.page.token": "Token",
        "ui.page.confirmDelete": "Delete {name}?",
        "ui.page.saved": "Saved",
        "ui.api.missingFields": "Missing required parameters: {fields}",
        "ui.api.invalidOrder": "order must be a non-negative integer",
        "ui.api.projectNotFound": "Project not found: {name}",
        "ui.api.projectConflict": "Project name or path already exists",
        "ui.api.cliNotFound": "CLI tool not found: {name}",
        "ui.api.cliConflict": "CLI name or command already exists",
        "ui.api.claudeMissing": "Claude configuration does not exist",
        "ui.api.profileExists": "Profile name already exists: {name}",
        "ui.api.notFound": "API endpoint not found",
        "ui.api.badLength": "Invalid Content-Length header",
    },
    "ja": {
        "errors.unexpected": "予期しないエラー：{message}",
        "errors.cancelled": "ユーザーにより操作がキャンセルされました。",
        "errors.failed": "コマンドの実行に失敗しました：{message}",
        "errors.config.readFailed": "設定ファイル {path} を読み込めません。手動で確認してください",
        "errors.config.invalid": "設定ファイル {path} の形式が正しくありません：",
        "errors.config.issue": "{path}: {message}",
        "errors.config.rootPath": "ルート",
        "errors.config.writeFailed": "{path} への書き込みに失敗しました：{message}",
        "select.invalid": "一覧の番号を入力してください",
        "select.multiHint": "（複数の番号はカンマ区切り）",
        "list.empty": "プロジェクトはまだありません。`acs add` で追加できます。",
        "list.summary": "プロジェクト {count} 件：",
        "list.entry": "{index}. {name} -> {path}",
        "list.debugCount": "設定には {count} 件のレコードがあります",
        "add.promptPath": "プロジェクトのパス",
        "add.validate.notExists": "パスが存在しません：{path}",
        "add.validate.notDirectory": "ディレクトリではありません：{path}",
        "add.duplicatePath": "このパスはすでに登録されています。それでも追加しますか？",
        "add.duplicateName": "同名のプロジェクトがあります。続行しますか？",
        "add.cancelled": "追加をキャンセルしました",
        "add.success": "追加しました：{name} -> {path}",
        "edit.none": "編集できるプロジェクトがありません",
        "edit.promptSelect": "編集するプロジェクトを選択",
        "edit.promptPath": "プロジェクトのパス",
        "edit.promptName": "プロジェクト名",
        "edit.validateName": "プロジェクト名は空にできません",
        "edit.noChanges": "変更はありません",
        "edit.duplicatePath": "他のプロジェクトがこのパスを使用しています。続行しますか？",
        "edit.duplicateName": "他のプロジェクトがこの名前を使用しています。続行しますか？",
        "edit.cancelled": "編集をキャンセルしました",
        "edit.success": "更新しました：{name} -> {path}",
        "edit.debugUpdated": "{previousName}({previousPath}) -> {name}({path})",
        "remove.none": "削除できるプロジェクトがありません",
        "remove.promptSelect": "削除するプロジェクトを選択",
        "remove.promptConfirm": "{count} 件のプロジェクトを削除しますか？",
        "remove.cancelledNoSelection": "何も選択されていないため、キャンセルしました",
        "remove.cancelled": "削除をキャンセルしました",
        "remove.success": "{count} 件のプロジェクトを削除しました：{names}",
        "remove.debugDetails": "削除したプロジェクトの詳細：{details}",
        "code.noProjects": "プロジェクトがありません。先に `acs add` で追加してください。",
        "code.noCli": "CLI 一覧が空です。{path} を編集して CLI を追加してください。",
        "code.noAvailableProjects": "登録されたプロジェクトのパスがどれも存在しません",
        "code.promptProject": "プロジェクトを選択",
        "code.promptCli": "実行する CLI を選択",
        "code.execute": "{project} で {cli} を実行します",
        "code.projectMissingSuffix": " [パスが存在しません]",
        "spawn.verbose": "実行コマンド：{command} @ {location}",
        "spawn.exitCode": "{command} の終了コード：{code}",
        "cli.list.empty": "CLI 一覧が空です。`acs cli add` で追加できます。",
        "cli.list.summary": "CLI ツール {count} 件：",
        "cli.list.entry": "{index}. {name} -> {command}",
        "cli.promptName": "CLI 名",
        "cli.promptCommand": "コマンド",
        "cli.promptOrder": "並び順（0 以上の整数）",
        "cli.validateName": "CLI 名は空にできません",
        "cli.validateCommand": "CLI コマンドは空にできません",
        "cli.validateOrder": "並び順は 0 以上の整数である必要があります",
        "cli.duplicateName": "同名の CLI があります。続行しますか？",
        "cli.duplicateCommand": "同じコマンドの CLI があります。続行しますか？",
        "cli.add.cancelled": "追加をキャンセルしました",
        "cli.add.success": "CLI を追加しました：{name} ({command})",
        "cli.edit.none": "編集できる CLI がありません",
        "cli.edit.promptSelect": "編集する CLI を選択",
        "cli.edit.noChanges": "変更はありません",
        "cli.edit.cancelled": "編集をキャンセルしました",
        "cli.edit.success": "CLI を更新しました：{name} ({command})",
        "cli.remove.none": "削除できる CLI がありません",
        "cli.remove.promptSelect": "削除する CLI を選択",
        "cli.remove.confirm": "{name} を削除しますか？",
        "cli.remove.cancelled": "削除をキャンセルしました",
        "cli.remove.success": "CLI を削除しました：{name}",
        "config.claude.notConfigured": "Claude が未設定です。{path} に config.claude を追加してください",
        "config.claude.currentUnset": "現在の Claude 設定はありません",
        "config.claude.currentMissing": "現在の設定 {name} は存在しません",
        "config.claude.currentTitle": "現在の Claude 設定：{name}",
        "config.claude.noProfiles": "Claude 設定がありません",
        "config.claude.listHeader": "Claude 設定 {count} 件：",
        "config.claude.profileNotFound": "設定が見つかりません：{name}",
        "config.claude.use.updated": "Claude 設定を {name} に切り替えました",
        "config.claude.use.settingsPath": "{path} に書き込みました",
        "lang.prompt": "CLI の表示言語を選択",
        "lang.invalid": "サポートされていない言語です：{input}。選択肢：{supported}",
        "lang.already": "{language} はすでに利用中です",
        "lang.updated": "言語を {language} に切り替えました",
        "lang.choiceCurrent": "（現在）",
        "language.zh": "中国語",
        "language.en": "英語",
        "language.ja": "日本語",
        "rules.unsupported": "サポートされていない CLI ツールです：{command}",
        "rules.sourceMissing": "ルールのソースファイルが見つかりません：{path}",
        "rules.written": "ルールファイルを書き込みました：{path}",
        "rules.backup": "以前の内容を {path} にバックアップしました",
        "ui.server.running": "管理画面を起動しました：{url}",
        "ui.server.opening": "ブラウザを開いています：{url}",
        "ui.server.openFailed": "ブラウザを開けませんでした（{message}）。{url} に手動でアクセスしてください",
        "ui.server.portInUse": "ポート {port} はすでに使用されています",
        "ui.server.invalidPort": "無効なポートです：{port}",
        "ui.server.failed": "管理画面の起動に失敗しました：{message}",
        "ui.server.stopHint": "Ctrl+C で停止します",
        "ui.server.stopped": "管理画面を停止しました",
        "ui.page.title": "acs 管理画面",
        "ui.page.projects": "プロジェクト",
        "ui.page.cli": "CLI ツール",
        "ui.page.profiles": "Claude 設定",
        "ui.page.name": "名前",
        "ui.page.path": "パス",
        "ui.page.command": "コマンド",
        "ui.page.order": "並び順",
        "ui.page.model": "モデル",
        "ui.page.add": "追加",
        "ui.page.delete": "削除",
        "ui.page.use": "使用",
        "ui.page.current": "現在",
        "ui.page.edit": "編集",
        "ui.page.save": "保存",
        "ui.page.cancel": "キャンセル",
        "ui.page.actions": "操作",
        "ui.page.empty": "データがありません",
        "ui.page.baseUrl": "Base URL",
        "ui.page.token": "Token",
        "ui.page.confirmDelete": "{name} を削除しますか？",
        "ui.page.saved": "保存しました",
        "ui.api.missingFields": "必須パラメータがありません: {fields}",
        "ui.api.invalidOrder": "order は 0 以上の整数である必要があります",
        "ui.api.projectNotFound": "プロジェクトが存在しません: {name}",
        "ui.api.projectConflict": "プロジェクト名またはパスは既に存在します",
        "ui.api.cliNotFound": "CLI が存在しません: {name}",
        "ui.api.cliConflict": "CLI 名またはコマンドは既に存在します",
        "ui.api.claudeMissing": "Claude の設定が存在しません",
        "ui.api.profileExists": "設定名は既に存在します: {name}",
        "ui.api.notFound": "API エンドポイントが見つかりません",
        "ui.api.badLength": "無効な Content-Length ヘッダーです",
    },
}

SUPPORTED_LANGUAGES: List[str] = [language.value for language in Language]


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class Translator:
    """Callable translator bound to one language: ``t("list.summary", count=3)``."""

    def __init__(self, language: Any = DEFAULT_LANGUAGE):
        if isinstance(language, Language):
            language = language.value
        self.language: str = language if is_supported_language(language) else DEFAULT_LANGUAGE.value

    def __call__(self, key: str, **values: Any) -> str:
        template = MESSAGES[self.language].get(key) or MESSAGES[DEFAULT_LANGUAGE.value].get(key) or key
        if not values:
            return template
        return string.Formatter().vformat(template, (), _KeepMissing(values))

    def catalog(self, prefix: str = "") -> Dict[str, str]:
        """All messages of this language whose key starts with prefix."""
        merged = dict(MESSAGES[DEFAULT_LANGUAGE.value])
        merged.update(MESSAGES[self.language])
        return {key: value for key, value in merged.items() if key.startswith(prefix)}


def is_supported_language(value: Optional[str]) -> bool:
    return isinstance(value, str) and value in MESSAGES


def language_display_name(language: str, t: Translator) -> str:
    return t(f"language.{language}")


def resolve_language(config_file: Path) -> str:
    """
    Peek at the language stored in the configuration file without validating
    it, so that even configuration errors can be reported in the user's
    language. Falls back to the default language.
    """
    try:
        raw = read_json(config_file)
    except OSError:
        raw = None
    if isinstance(raw, dict) and is_supported_language(raw.get("language")):
        return raw["language"]
    return DEFAULT_LANGUAGE.value


def describe_error(error: AcsError, t: Translator, config_path: str = "") -> List[str]:
    """
    Localized message lines for an acs error. The first line is the summary;
    for an invalid configuration every issue follows on its own line.
    """
    if isinstance(error, ConfigFormatError):
        lines = [t("errors.config.invalid", path=format_path_for_display(error.path))]
        for issue in error.issues:
            lines.append(t(
                "errors.config.issue",
                path=issue.field_path or t("errors.config.rootPath"),
                message=issue.reason,
            ))
        return lines
    if isinstance(error, ConfigWriteError):
        return [t("errors.config.writeFailed", path=format_path_for_display(error.path), message=error.error_message)]
    if isinstance(error, ConfigReadError):
        return [t("errors.config.readFailed", path=format_path_for_display(error.path))]
    if isinstance(error, ClaudeNotConfiguredError):
        return [t("config.claude.notConfigured", path=format_path_for_display(config_path))]
    if isinstance(error, ProfileNotFoundError):
        return [t("config.claude.profileNotFound", name=error.name)]
    if isinstance(error, UnsupportedLanguageError):
        return [t("lang.invalid", input=error.language, supported=", ".join(error.supported))]
    if isinstance(error, ProjectPathError):
        key = "add.validate.notExists" if error.reason == ProjectPathError.NOT_EXISTS else "add.validate.notDirectory"
        return [t(key, path=format_path_for_display(error.path))]
    if isinstance(error, RuleSourceError):
        return [t("rules.sourceMissing", path=format_path_for_display(error.path))]
    if isinstance(error, UnsupportedCliError):
        return [t("rules.unsupported", command=error.command)]
    return [t("errors.failed", message=str(error))]
