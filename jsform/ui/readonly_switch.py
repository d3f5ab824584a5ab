from __future__ import annotations

from PySide6.QtWidgets import QWidget, QCheckBox

from jsform.core import FormState


class ReadonlySwitch(QCheckBox):
    """A toggle that drives (and follows) a form state's readonly flag."""

    def __init__(self, state: FormState | None = None, parent: QWidget | None = None):
        super().__init__(parent)
        self._state: FormState | None = None
        self.setToolTip("Show the form without edit controls")
        self.setStyleSheet("""
                    QCheckBox::indicator {
                        width: 32px; height: 16px;
                        border-radius: 8px;
                        border: 1px solid #555;
                    }
                    QCheckBox::indicator:unchecked { background-color: #ccc; }
                    QCheckBox::indicator:checked { background-color: #93c5fd; }
                """)
        self._update_text(False)
        self.toggled.connect(self._on_toggled)
        if state is not None:
            self.bind(state)

    def bind(self, state: FormState) -> None:
        """ Follow a (new) form state. The switch takes the state's current value. """
        if self._state is not None:
            self._state.readonlyChanged.disconnect(self._on_state_changed)
        self._state = state
        state.readonlyChanged.connect(self._on_state_changed)
        self._on_state_changed(state.readonly())

    def _update_text(self, on: bool) -> None:
        self.setText(f"Read-only {'true' if on else 'false'}")

    def _on_toggled(self, checked: bool) -> None:
        self._update_text(checked)
        if self._state is not None:
            self._state.set_readonly(checked)

    def _on_state_changed(self, on: bool) -> None:
        if self.isChecked() != on:
            self.blockSignals(True)
            self.setChecked(on)
            self.blockSignals(False)
        self._update_text(on)
