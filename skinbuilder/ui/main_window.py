"""Main application window for the skin builder."""

from __future__ import annotations

import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from PyQt6 import QtCore, QtGui, QtWidgets
from PyQt6.QtWebEngineWidgets import QWebEngineView

from ..config import APP_TITLE, PROJECT_SUFFIX, SettingsManager, UploadConfig, app_data_dir
from ..core import editing, generator, storage
from ..core.colors import HEX_COLOR_PATTERN, is_hex_color
from ..core.errors import ProjectFormatError, UploadError
from ..core.models import (
    GOOGLE_ENGINES,
    IOS_MODES,
    MESSAGE_STATUSES,
    NOTE_ALIGNMENTS,
    NOTE_STYLES,
    Message,
    Project,
    default_project,
)
from ..core.variants import REGISTRY, variant_spec
from ..uploads import upload_image_file

logger = logging.getLogger(__name__)

PROJECT_FILTER = f"Skin Project (*{PROJECT_SUFFIX})"
IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.webp)"

# Option fields edited with a combo box; "" leaves the field unset.
CHOICE_FIELDS: Dict[Tuple[str, str], Tuple[str, ...]] = {
    ("chat", "ios_mode"): ("",) + IOS_MODES,
    ("note", "style"): NOTE_STYLES,
    ("note", "alignment"): NOTE_ALIGNMENTS,
    ("google", "engine"): GOOGLE_ENGINES,
}


def _label(name: str) -> str:
    return name.replace("_", " ").capitalize()


class OptionsForm(QtWidgets.QWidget):
    """Form for one option block, built from the block's dataclass fields."""

    changed = QtCore.pyqtSignal(str, str, object)

    def __init__(self, block: str, block_cls: type, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.block = block
        self._widgets: Dict[str, QtWidgets.QWidget] = {}
        layout = QtWidgets.QFormLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        for f in fields(block_cls):
            kind = str(f.type)
            widget: QtWidgets.QWidget
            if (block, f.name) in CHOICE_FIELDS:
                combo = QtWidgets.QComboBox(self)
                combo.addItems(list(CHOICE_FIELDS[(block, f.name)]))
                combo.currentTextChanged.connect(lambda text, n=f.name: self.changed.emit(self.block, n, text or None))
                widget = combo
            elif "bool" in kind:
                check = QtWidgets.QCheckBox(self)
                check.toggled.connect(lambda on, n=f.name: self.changed.emit(self.block, n, on))
                widget = check
            elif "int" in kind:
                spin = QtWidgets.QSpinBox(self)
                spin.setRange(0, 999_999_999)
                spin.setGroupSeparatorShown(True)
                spin.valueChanged.connect(lambda value, n=f.name: self.changed.emit(self.block, n, value))
                widget = spin
            elif f.name == "suggestions":
                text = QtWidgets.QPlainTextEdit(self)
                text.setPlaceholderText("One suggestion per line, *word* for bold")
                text.setFixedHeight(80)
                text.textChanged.connect(
                    lambda t=text: self.changed.emit(self.block, "suggestions", tuple(t.toPlainText().splitlines()))
                )
                widget = text
            elif "str" in kind:
                line = QtWidgets.QLineEdit(self)
                line.textChanged.connect(lambda value, n=f.name: self.changed.emit(self.block, n, value))
                widget = line
            else:
                continue
            self._widgets[f.name] = widget
            layout.addRow(_label(f.name), widget)

    def load(self, options: object) -> None:
        for name, widget in self._widgets.items():
            value = getattr(options, name)
            widget.blockSignals(True)
            if isinstance(widget, QtWidgets.QComboBox):
                index = widget.findText(value or "")
                widget.setCurrentIndex(max(index, 0))
            elif isinstance(widget, QtWidgets.QCheckBox):
                widget.setChecked(bool(value))
            elif isinstance(widget, QtWidgets.QSpinBox):
                widget.setValue(int(value or 0))
            elif isinstance(widget, QtWidgets.QPlainTextEdit):
                widget.setPlainText("\n".join(value or ()))
            elif isinstance(widget, QtWidgets.QLineEdit):
                widget.setText(value or "")
            widget.blockSignals(False)


class _UploadWorker(QtCore.QObject):
    finished = QtCore.pyqtSignal(str)
    errored = QtCore.pyqtSignal(str)

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path

    def run(self) -> None:
        try:
            url = upload_image_file(self.path, UploadConfig())
        except UploadError as exc:
            self.errored.emit(str(exc))
            return
        self.finished.emit(url)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, settings: Optional[SettingsManager] = None) -> None:
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(1320, 840)

        self.settings = settings or SettingsManager()
        self.autosave_path = app_data_dir() / f"current{PROJECT_SUFFIX}"
        self.project: Project = storage.load_stored_project(self.autosave_path)
        # The working copy stays tied to the file it was last opened from or saved to.
        last_project = self.settings.get("last_project")
        self.project_path: Optional[Path] = Path(last_project) if last_project and os.path.isfile(last_project) else None
        self._upload_threads: List[QtCore.QThread] = []
        self._upload_workers: List[_UploadWorker] = []

        self._debounce = QtCore.QTimer(self)
        self._debounce.setInterval(300)
        self._debounce.setSingleShot(True)
        self._debounce.timeout.connect(self.update_outputs)

        self._build_ui()
        self._build_menu()
        self._bind_events()

        self._load_project_into_ui()
        self.update_outputs()

    # ------------------------------------------------------------------ UI --
    def _build_ui(self) -> None:
        splitter = QtWidgets.QSplitter(self)
        splitter.setOrientation(QtCore.Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        # Settings panel
        left_scroll = QtWidgets.QScrollArea(self)
        left_scroll.setWidgetResizable(True)
        left_panel = QtWidgets.QWidget(left_scroll)
        left_layout = QtWidgets.QVBoxLayout(left_panel)
        left_layout.setContentsMargins(6, 6, 6, 6)

        self.variant_combo = QtWidgets.QComboBox(left_panel)
        for key, spec in REGISTRY.items():
            self.variant_combo.addItem(spec.title, key)
        left_layout.addWidget(QtWidgets.QLabel("Template", left_panel))
        left_layout.addWidget(self.variant_combo)

        shared_box = QtWidgets.QGroupBox("Appearance", left_panel)
        shared = QtWidgets.QFormLayout(shared_box)
        self.sender_color_edit = QtWidgets.QLineEdit(shared_box)
        self.receiver_color_edit = QtWidgets.QLineEdit(shared_box)
        color_regex = QtCore.QRegularExpression(HEX_COLOR_PATTERN)
        for edit in (self.sender_color_edit, self.receiver_color_edit):
            edit.setValidator(QtGui.QRegularExpressionValidator(color_regex, edit))
            edit.setPlaceholderText("#rrggbb")
        self.btn_sender_color = QtWidgets.QPushButton("…", shared_box)
        self.btn_receiver_color = QtWidgets.QPushButton("…", shared_box)
        shared.addRow("Sender color", _row(self.sender_color_edit, self.btn_sender_color))
        shared.addRow("Receiver color", _row(self.receiver_color_edit, self.btn_receiver_color))
        self.opacity_spin = QtWidgets.QDoubleSpinBox(shared_box)
        self.opacity_spin.setRange(0.0, 1.0)
        self.opacity_spin.setSingleStep(0.05)
        shared.addRow("Bubble opacity", self.opacity_spin)
        self.width_spin = QtWidgets.QSpinBox(shared_box)
        self.width_spin.setRange(280, 800)
        self.width_spin.setSuffix(" px")
        shared.addRow("Max width", self.width_spin)
        self.font_edit = QtWidgets.QLineEdit(shared_box)
        shared.addRow("Font family", self.font_edit)
        self.dark_neutral_check = QtWidgets.QCheckBox("Dark neutral background", shared_box)
        self.watermark_check = QtWidgets.QCheckBox("Watermark", shared_box)
        shared.addRow(self.dark_neutral_check)
        shared.addRow(self.watermark_check)
        left_layout.addWidget(shared_box)

        self.options_box = QtWidgets.QGroupBox("Template options", left_panel)
        options_layout = QtWidgets.QVBoxLayout(self.options_box)
        self.options_stack = QtWidgets.QStackedWidget(self.options_box)
        self.option_forms: Dict[str, OptionsForm] = {}
        for spec in REGISTRY.values():
            if spec.options_attr in self.option_forms:
                continue
            block_cls = type(getattr(self.project.settings, spec.options_attr))
            form = OptionsForm(spec.options_attr, block_cls, self.options_stack)
            self.option_forms[spec.options_attr] = form
            self.options_stack.addWidget(form)
        options_layout.addWidget(self.options_stack)
        left_layout.addWidget(self.options_box)
        left_layout.addStretch(1)
        left_scroll.setWidget(left_panel)

        # Messages panel
        mid_panel = QtWidgets.QWidget(self)
        mid_layout = QtWidgets.QVBoxLayout(mid_panel)
        mid_layout.setContentsMargins(6, 6, 6, 6)
        self.messages_list = QtWidgets.QListWidget(mid_panel)
        self.messages_list.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        btn_row = QtWidgets.QHBoxLayout()
        self.btn_add_message = QtWidgets.QPushButton("Add", mid_panel)
        self.btn_remove_message = QtWidgets.QPushButton("Remove", mid_panel)
        self.btn_up = QtWidgets.QPushButton("Up", mid_panel)
        self.btn_down = QtWidgets.QPushButton("Down", mid_panel)
        for btn in (self.btn_add_message, self.btn_remove_message, self.btn_up, self.btn_down):
            btn_row.addWidget(btn)
        mid_layout.addWidget(QtWidgets.QLabel("Messages", mid_panel))
        mid_layout.addWidget(self.messages_list, 1)
        mid_layout.addLayout(btn_row)

        editor_box = QtWidgets.QGroupBox("Message", mid_panel)
        editor = QtWidgets.QFormLayout(editor_box)
        self.sender_edit = QtWidgets.QLineEdit(editor_box)
        self.content_edit = QtWidgets.QPlainTextEdit(editor_box)
        self.content_edit.setFixedHeight(90)
        self.outgoing_check = QtWidgets.QCheckBox("Sent by me", editor_box)
        self.timestamp_edit = QtWidgets.QLineEdit(editor_box)
        self.avatar_edit = QtWidgets.QLineEdit(editor_box)
        self.btn_upload_avatar = QtWidgets.QPushButton("Upload…", editor_box)
        self.status_combo = QtWidgets.QComboBox(editor_box)
        self.status_combo.addItems([""] + list(MESSAGE_STATUSES))
        self.reaction_edit = QtWidgets.QLineEdit(editor_box)
        self.role_color_edit = QtWidgets.QLineEdit(editor_box)
        self.role_color_edit.setPlaceholderText("#5865F2 or a role name")
        editor.addRow("Sender", self.sender_edit)
        editor.addRow("Text", self.content_edit)
        editor.addRow(self.outgoing_check)
        editor.addRow("Time", self.timestamp_edit)
        editor.addRow("Avatar URL", _row(self.avatar_edit, self.btn_upload_avatar))
        editor.addRow("Status", self.status_combo)
        editor.addRow("Reaction", self.reaction_edit)
        editor.addRow("Role color", self.role_color_edit)
        self.message_editor = editor_box
        mid_layout.addWidget(editor_box)

        # Output
        right_tabs = QtWidgets.QTabWidget(self)
        right_tabs.setDocumentMode(True)

        preview_panel = QtWidgets.QWidget(right_tabs)
        preview_layout = QtWidgets.QVBoxLayout(preview_panel)
        preview_layout.setContentsMargins(0, 6, 0, 0)
        toggles = QtWidgets.QHBoxLayout()
        self.preview_dark_check = QtWidgets.QCheckBox("Dark page", preview_panel)
        self.preview_mobile_check = QtWidgets.QCheckBox("Mobile width", preview_panel)
        self.preview_dark_check.setChecked(self.settings.get_bool("preview_dark"))
        self.preview_mobile_check.setChecked(self.settings.get_bool("preview_mobile", True))
        toggles.addWidget(self.preview_dark_check)
        toggles.addWidget(self.preview_mobile_check)
        toggles.addStretch(1)
        self.preview = QWebEngineView(preview_panel)
        preview_layout.addLayout(toggles)
        preview_layout.addWidget(self.preview, 1)

        self.html_output = QtWidgets.QPlainTextEdit(right_tabs)
        self.html_output.setReadOnly(True)
        self.css_output = QtWidgets.QPlainTextEdit(right_tabs)
        self.css_output.setReadOnly(True)
        self.btn_copy_html = QtWidgets.QPushButton("Copy HTML", right_tabs)
        self.btn_copy_css = QtWidgets.QPushButton("Copy CSS", right_tabs)

        right_tabs.addTab(preview_panel, "Preview")
        right_tabs.addTab(_column(self.html_output, self.btn_copy_html), "HTML")
        right_tabs.addTab(_column(self.css_output, self.btn_copy_css), "CSS")

        splitter.addWidget(left_scroll)
        splitter.addWidget(mid_panel)
        splitter.addWidget(right_tabs)
        splitter.setSizes([360, 420, 540])

        self.status = self.statusBar()

    def _build_menu(self) -> None:
        bar = self.menuBar()
        if bar is None:
            bar = QtWidgets.QMenuBar(self)
            self.setMenuBar(bar)

        file_menu = bar.addMenu("&File")
        self.act_new = QtGui.QAction("New Project", self)
        self.act_open = QtGui.QAction("Open Project…", self)
        self.act_save = QtGui.QAction("Save", self)
        self.act_save_as = QtGui.QAction("Save As…", self)
        self.act_quit = QtGui.QAction("Quit", self)
        self.act_new.setShortcut(QtGui.QKeySequence.StandardKey.New)
        self.act_open.setShortcut(QtGui.QKeySequence.StandardKey.Open)
        self.act_save.setShortcut(QtGui.QKeySequence.StandardKey.Save)
        if file_menu is not None:
            file_menu.addActions([self.act_new, self.act_open])
            file_menu.addSeparator()
            file_menu.addActions([self.act_save, self.act_save_as])
            file_menu.addSeparator()
            file_menu.addAction(self.act_quit)

        help_menu = bar.addMenu("&Help")
        self.act_about = QtGui.QAction("About", self)
        if help_menu is not None:
            help_menu.addAction(self.act_about)

    def _bind_events(self) -> None:
        self.variant_combo.currentIndexChanged.connect(self._on_variant_changed)

        self.sender_color_edit.textChanged.connect(lambda: self._set_color("sender_color", self.sender_color_edit))
        self.receiver_color_edit.textChanged.connect(lambda: self._set_color("receiver_color", self.receiver_color_edit))
        self.btn_sender_color.clicked.connect(lambda: self._pick_color(self.sender_color_edit))
        self.btn_receiver_color.clicked.connect(lambda: self._pick_color(self.receiver_color_edit))
        self.opacity_spin.valueChanged.connect(lambda v: self._set_shared(bubble_opacity=round(v, 2)))
        self.width_spin.valueChanged.connect(lambda v: self._set_shared(max_width_px=v))
        self.font_edit.textChanged.connect(lambda v: self._set_shared(font_family=v))
        self.dark_neutral_check.toggled.connect(lambda on: self._set_shared(use_dark_neutral=on))
        self.watermark_check.toggled.connect(lambda on: self._set_shared(watermark=on))
        for form in self.option_forms.values():
            form.changed.connect(self._on_option_changed)

        self.messages_list.currentRowChanged.connect(self._load_message_into_editor)
        self.btn_add_message.clicked.connect(self.add_message)
        self.btn_remove_message.clicked.connect(self.remove_message)
        self.btn_up.clicked.connect(lambda: self.move_message(-1))
        self.btn_down.clicked.connect(lambda: self.move_message(1))
        self.sender_edit.textChanged.connect(lambda v: self._set_message(sender=v))
        self.content_edit.textChanged.connect(lambda: self._set_message(content=self.content_edit.toPlainText()))
        self.outgoing_check.toggled.connect(lambda on: self._set_message(outgoing=on))
        self.timestamp_edit.textChanged.connect(lambda v: self._set_message(timestamp=v or None))
        self.avatar_edit.textChanged.connect(lambda v: self._set_message(avatar_url=v.strip() or None))
        self.status_combo.currentTextChanged.connect(lambda v: self._set_message(status=v or None))
        self.reaction_edit.textChanged.connect(lambda v: self._set_message(reaction=v or None))
        self.role_color_edit.textChanged.connect(lambda v: self._set_message(role_color=v.strip() or None))
        self.btn_upload_avatar.clicked.connect(self.upload_avatar)

        self.preview_dark_check.toggled.connect(self._on_preview_toggle)
        self.preview_mobile_check.toggled.connect(self._on_preview_toggle)
        self.btn_copy_html.clicked.connect(lambda: self._copy(self.html_output, "HTML"))
        self.btn_copy_css.clicked.connect(lambda: self._copy(self.css_output, "CSS"))

        self.act_new.triggered.connect(self.new_project)
        self.act_open.triggered.connect(self.open_project_dialog)
        self.act_save.triggered.connect(self.save_project)
        self.act_save_as.triggered.connect(self.save_project_as)
        self.act_quit.triggered.connect(self.close)
        self.act_about.triggered.connect(self.show_about)

    # ----------------------------------------------------------- Project Ops --
    def new_project(self) -> None:
        self.project = default_project()
        self.project_path = None
        self.settings.set("last_project", "")
        self._load_project_into_ui()
        self._project_changed()

    def open_project_dialog(self) -> None:
        path, _ = QtWidgets.QFileDialog.getOpenFileName(self, "Open Project", "", PROJECT_FILTER)
        if not path:
            return
        try:
            self.project = storage.load_project(path)
        except (OSError, ProjectFormatError) as exc:
            logger.warning("Could not open %s: %s", path, exc)
            QtWidgets.QMessageBox.warning(self, "Open Project", f"Could not open {path}:\n{exc}")
            return
        self.project_path = Path(path)
        self.settings.set("last_project", str(path))
        self._load_project_into_ui()
        self._project_changed()
        if self.status is not None:
            self.status.showMessage(f"Opened {os.path.basename(path)}", 4000)

    def save_project(self) -> None:
        if not self.project_path:
            self.save_project_as()
            return
        if not self._write_project(self.project_path):
            return
        if self.status is not None:
            self.status.showMessage("Project saved", 2500)

    def save_project_as(self) -> None:
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Save Project As", "", PROJECT_FILTER)
        if not path:
            return
        path = path if path.endswith(PROJECT_SUFFIX) else f"{path}{PROJECT_SUFFIX}"
        if not self._write_project(path):
            return
        self.project_path = Path(path)
        self.settings.set("last_project", path)
        self.update_window_title()
        if self.status is not None:
            self.status.showMessage(f"Saved {os.path.basename(path)}", 4000)

    def _write_project(self, path: str | Path) -> bool:
        try:
            storage.save_project(path, self.project)
        except OSError as exc:
            logger.warning("Could not save %s: %s", path, exc)
            QtWidgets.QMessageBox.warning(self, "Save Project", f"Could not save {path}:\n{exc}")
            return False
        return True

    def _project_changed(self) -> None:
        storage.persist_project(self.autosave_path, self.project)
        self._debounce.start()

    # ------------------------------------------------------------- Settings --
    def _on_variant_changed(self, index: int) -> None:
        variant = self.variant_combo.itemData(index)
        if not variant:
            return
        self.project = editing.switch_variant(self.project, variant)
        self._load_settings_into_ui()
        self._project_changed()

    def _set_shared(self, **changes: object) -> None:
        self.project = editing.update_settings(self.project, **changes)
        self._project_changed()

    def _set_color(self, name: str, edit: QtWidgets.QLineEdit) -> None:
        # Half-typed colors stay in the box until they are a full #rrggbb.
        if edit.hasAcceptableInput() and is_hex_color(edit.text()):
            self._set_shared(**{name: edit.text()})

    def _on_option_changed(self, block: str, name: str, value: object) -> None:
        self.project = editing.update_options(self.project, block, **{name: value})
        self._project_changed()

    def _pick_color(self, target: QtWidgets.QLineEdit) -> None:
        color = QtWidgets.QColorDialog.getColor(QtGui.QColor(target.text()), self, "Choose color")
        if color.isValid():
            target.setText(color.name())

    # ------------------------------------------------------------- Messages --
    def _current_message(self) -> Optional[Message]:
        row = self.messages_list.currentRow()
        if 0 <= row < len(self.project.messages):
            return self.project.messages[row]
        return None

    def _set_message(self, **changes: object) -> None:
        message = self._current_message()
        if message is None:
            return
        self.project = editing.update_message(self.project, message.id, **changes)
        item = self.messages_list.currentItem()
        if item is not None:
            item.setText(_message_label(self.project.messages[self.messages_list.currentRow()]))
        self._project_changed()

    def add_message(self) -> None:
        self.project = editing.add_message(self.project)
        self._refresh_messages_list(select_index=len(self.project.messages) - 1)
        self._project_changed()

    def remove_message(self) -> None:
        message = self._current_message()
        if message is None:
            return
        row = self.messages_list.currentRow()
        self.project = editing.remove_message(self.project, message.id)
        self._refresh_messages_list(select_index=max(0, row - 1))
        self._project_changed()

    def move_message(self, offset: int) -> None:
        message = self._current_message()
        if message is None:
            return
        self.project = editing.move_message(self.project, message.id, offset)
        self._refresh_messages_list(select_index=self.project.messages.index(message))
        self._project_changed()

    def upload_avatar(self) -> None:
        message = self._current_message()
        if message is None:
            return
        path, _ = QtWidgets.QFileDialog.getOpenFileName(self, "Upload Avatar", "", IMAGE_FILTER)
        if not path:
            return
        message_id = message.id
        self.btn_upload_avatar.setEnabled(False)
        if self.status is not None:
            self.status.showMessage(f"Uploading {os.path.basename(path)}…")
        thread = QtCore.QThread(self)
        worker = _UploadWorker(path)
        worker.moveToThread(thread)

        def handle_finish(url: str) -> None:
            self._apply_avatar(message_id, url)
            thread.quit()

        def handle_error(text: str) -> None:
            if self.status is not None:
                self.status.clearMessage()
            QtWidgets.QMessageBox.warning(self, "Upload", text)
            thread.quit()

        def cleanup() -> None:
            self.btn_upload_avatar.setEnabled(True)
            if thread in self._upload_threads:
                self._upload_threads.remove(thread)
            if worker in self._upload_workers:
                self._upload_workers.remove(worker)
            worker.deleteLater()
            thread.deleteLater()

        worker.finished.connect(handle_finish)
        worker.errored.connect(handle_error)
        thread.finished.connect(cleanup)
        thread.started.connect(worker.run)
        self._upload_threads.append(thread)
        self._upload_workers.append(worker)
        thread.start()

    def _apply_avatar(self, message_id: str, url: str) -> None:
        self.project = editing.update_message(self.project, message_id, avatar_url=url)
        current = self._current_message()
        if current is not None and current.id == message_id:
            self.avatar_edit.blockSignals(True)
            self.avatar_edit.setText(url)
            self.avatar_edit.blockSignals(False)
        self._project_changed()
        if self.status is not None:
            self.status.showMessage("Avatar uploaded", 2500)

    # ----------------------------------------------------------------- Sync --
    def _load_project_into_ui(self) -> None:
        self.variant_combo.blockSignals(True)
        self.variant_combo.setCurrentIndex(max(0, self.variant_combo.findData(self.project.variant)))
        self.variant_combo.blockSignals(False)
        self._load_settings_into_ui()
        self._refresh_messages_list(select_index=0)
        self.update_window_title()

    def _load_settings_into_ui(self) -> None:
        s = self.project.settings
        widgets = (
            self.sender_color_edit, self.receiver_color_edit, self.opacity_spin, self.width_spin,
            self.font_edit, self.dark_neutral_check, self.watermark_check,
        )
        for widget in widgets:
            widget.blockSignals(True)
        self.sender_color_edit.setText(s.sender_color)
        self.receiver_color_edit.setText(s.receiver_color)
        self.opacity_spin.setValue(s.bubble_opacity)
        self.width_spin.setValue(s.max_width_px)
        self.font_edit.setText(s.font_family)
        self.dark_neutral_check.setChecked(s.use_dark_neutral)
        self.watermark_check.setChecked(s.watermark)
        for widget in widgets:
            widget.blockSignals(False)

        block = variant_spec(self.project.variant).options_attr
        form = self.option_forms[block]
        form.load(s.options(block))
        self.options_stack.setCurrentWidget(form)

    def _refresh_messages_list(self, select_index: int = 0) -> None:
        self.messages_list.blockSignals(True)
        self.messages_list.clear()
        for message in self.project.messages:
            self.messages_list.addItem(_message_label(message))
        self.messages_list.blockSignals(False)

        count = self.messages_list.count()
        self.message_editor.setEnabled(count > 0)
        if count == 0:
            return
        select_index = max(0, min(select_index, count - 1))
        self.messages_list.setCurrentRow(select_index)
        self._load_message_into_editor(select_index)

    def _load_message_into_editor(self, row: int) -> None:
        if not (0 <= row < len(self.project.messages)):
            return
        m = self.project.messages[row]
        widgets = (
            self.sender_edit, self.content_edit, self.outgoing_check, self.timestamp_edit,
            self.avatar_edit, self.status_combo, self.reaction_edit, self.role_color_edit,
        )
        for widget in widgets:
            widget.blockSignals(True)
        self.sender_edit.setText(m.sender)
        self.content_edit.setPlainText(m.content)
        self.outgoing_check.setChecked(m.outgoing)
        self.timestamp_edit.setText(m.timestamp or "")
        self.avatar_edit.setText(m.avatar_url or "")
        self.status_combo.setCurrentIndex(max(0, self.status_combo.findText(m.status or "")))
        self.reaction_edit.setText(m.reaction or "")
        self.role_color_edit.setText(m.role_color or "")
        for widget in widgets:
            widget.blockSignals(False)

    # --------------------------------------------------------------- Output --
    def update_outputs(self) -> None:
        try:
            skin = generator.render(self.project)
        except ValueError as exc:
            logger.warning("Could not render project: %s", exc)
            if self.status is not None:
                self.status.showMessage(f"Cannot render: {exc}", 6000)
            return
        self.html_output.setPlainText(skin.html)
        self.css_output.setPlainText(skin.css)
        page = generator.render_preview_page(
            self.project,
            dark=self.preview_dark_check.isChecked(),
            mobile=self.preview_mobile_check.isChecked(),
        )
        self.preview.setHtml(page, QtCore.QUrl("https://localhost/"))

    def _on_preview_toggle(self) -> None:
        self.settings.set_bool("preview_dark", self.preview_dark_check.isChecked())
        self.settings.set_bool("preview_mobile", self.preview_mobile_check.isChecked())
        self._debounce.start()

    def _copy(self, source: QtWidgets.QPlainTextEdit, what: str) -> None:
        clipboard = QtWidgets.QApplication.clipboard()
        if clipboard is not None:
            clipboard.setText(source.toPlainText())
        if self.status is not None:
            self.status.showMessage(f"{what} copied to clipboard", 2500)

    # ---------------------------------------------------------------- Misc --
    def show_about(self) -> None:
        QtWidgets.QMessageBox.information(
            self,
            "About",
            f"{APP_TITLE}\n\nBuild fake chat and post mockups as HTML and CSS for work skins.",
        )

    def update_window_title(self) -> None:
        suffix = f" — {self.project_path.name}" if self.project_path else ""
        self.setWindowTitle(f"{APP_TITLE}{suffix}")

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # noqa: N802 (Qt override)
        storage.persist_project(self.autosave_path, self.project)
        super().closeEvent(event)


def _message_label(message: Message) -> str:
    arrow = "→" if message.outgoing else "←"
    text = message.content.splitlines()[0] if message.content else ""
    return f"{arrow} {message.sender}: {text[:40]}"


def _row(*widgets: QtWidgets.QWidget) -> QtWidgets.QWidget:
    holder = QtWidgets.QWidget()
    layout = QtWidgets.QHBoxLayout(holder)
    layout.setContentsMargins(0, 0, 0, 0)
    for widget in widgets:
        layout.addWidget(widget, 1 if isinstance(widget, QtWidgets.QLineEdit) else 0)
    return holder


def _column(*widgets: QtWidgets.QWidget) -> QtWidgets.QWidget:
    holder = QtWidgets.QWidget()
    layout = QtWidgets.QVBoxLayout(holder)
    layout.setContentsMargins(0, 6, 0, 0)
    for widget in widgets:
        layout.addWidget(widget, 1 if isinstance(widget, QtWidgets.QPlainTextEdit) else 0)
    return holder
