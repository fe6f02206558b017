"""Janela de exclusão em três etapas: senha, confirmação e código."""
from __future__ import annotations

import tkinter as tk
from typing import Callable, Optional

from core.errors import AppError
from services.controller import Controller
from services.deletion_flow import SELF, DeletionFlow
from ui.common import clear, show_alert


class DeletionDialog:
    def __init__(
        self,
        master: tk.Misc,
        controller: Controller,
        target_id: int = SELF,
        on_deleted: Optional[Callable[[], None]] = None,
    ):
        self.flow = DeletionFlow(controller, target_id)
        self.on_deleted = on_deleted
        self.window = tk.Toplevel(master)
        self.window.resizable(False, False)
        self.window.transient(master)
        self.window.grab_set()
        self.error_label: Optional[tk.Label] = None
        self._show_verify_user()

    def _header(self, title: str) -> None:
        clear(self.window)
        self.window.title(title)
        tk.Label(self.window, text=title, font=("Arial", 12, "bold")).pack(pady=(10, 2))
        tk.Label(self.window, text=self.flow.username).pack()

    def _footer(self, confirm: Callable[[], None]) -> None:
        self.error_label = tk.Label(self.window, text="", fg="red")
        self.error_label.pack()
        buttons = tk.Frame(self.window)
        buttons.pack(pady=10)
        tk.Button(buttons, text="Confirm", width=10, command=confirm).grid(row=0, column=0, padx=5)
        tk.Button(buttons, text="Cancel", width=10, command=self.window.destroy).grid(row=0, column=1, padx=5)

    def _show_error(self) -> None:
        if self.error_label is not None:
            self.error_label.configure(text=self.flow.error)

    # Etapa 1 ---------------------------------------------------------
    def _show_verify_user(self) -> None:
        self._header("Verify your identity")
        tk.Label(self.window, text="Password").pack(pady=(10, 2))
        self.password_entry = tk.Entry(self.window, show="*")
        self.password_entry.pack(padx=20)
        self._footer(self._confirm_password)

    def _confirm_password(self) -> None:
        if self.flow.verify_password(self.password_entry.get()):
            self._show_verify_action()
        else:
            self._show_error()

    # Etapa 2 ---------------------------------------------------------
    def _show_verify_action(self) -> None:
        self._header("Verify your Action")
        text = "Do you really want to delete this account? This cannot be undone."
        tk.Label(self.window, text=text, wraplength=260).pack(padx=20, pady=10)
        self._footer(self._confirm_action)

    def _confirm_action(self) -> None:
        self.flow.confirm_action()
        self._show_captcha()

    # Etapa 3 ---------------------------------------------------------
    def _show_captcha(self) -> None:
        self._header("Verify Captcha")
        self.code_label = tk.Label(self.window, text=str(self.flow.code), font=("Courier", 18, "bold"))
        self.code_label.pack(pady=8)
        self.code_entry = tk.Entry(self.window)
        self.code_entry.pack(padx=20)
        self._footer(self._confirm_captcha)

    def _confirm_captcha(self) -> None:
        try:
            deleted = self.flow.submit_captcha(self.code_entry.get())
        except AppError as e:
            show_alert("Error", str(e))
            return
        if not deleted:
            self.code_label.configure(text=str(self.flow.code))
            self.code_entry.delete(0, tk.END)
            self._show_error()
            return
        self.window.destroy()
        show_alert("Success", "User deleted successfully.", "info")
        if self.on_deleted is not None:
            self.on_deleted()
