"""Campos de perfil compartilhados pelas janelas de cadastro, usuário e admin."""
from __future__ import annotations

import tkinter as tk
from typing import Dict, List, Optional

from models import Gender, User
from services.validation import CARD_GROUP_SIZE, TELEPHONE_LENGTH, digits_only, join_card
from ui.common import labeled_entry

ERROR_COLOR = "#f8d7da"
NORMAL_COLOR = "white"


class ProfileForm:
    def __init__(self, master: tk.Misc, include_account: bool = True) -> None:
        self.frame = tk.Frame(master)
        self.entries: Dict[str, tk.Entry] = {}
        self._readonly: List[str] = []
        row = 0
        if include_account:
            self.entries["username"] = labeled_entry(self.frame, "Username", row)
            self.entries["email"] = labeled_entry(self.frame, "Email", row + 1)
            row += 2
        self.entries["password"] = labeled_entry(self.frame, "Password", row, show="*")
        self.entries["name"] = labeled_entry(self.frame, "Name", row + 1)
        self.entries["lastname"] = labeled_entry(self.frame, "Last name", row + 2)
        self.entries["telephone"] = labeled_entry(self.frame, "Telephone", row + 3)
        self._limit_digits(self.entries["telephone"], TELEPHONE_LENGTH)
        row += 4

        tk.Label(self.frame, text="Gender").grid(row=row, column=0, sticky="w", padx=5)
        self.gender = tk.StringVar(value=Gender.OTHER.value)
        for column, gender in enumerate(Gender, start=1):
            tk.Radiobutton(
                self.frame, text=gender.value.title(), variable=self.gender, value=gender.value
            ).grid(row=row, column=column, sticky="w")
        row += 1

        tk.Label(self.frame, text="Card").grid(row=row, column=0, sticky="w", padx=5)
        self.card_entries: List[tk.Entry] = []
        for column in range(4):
            entry = tk.Entry(self.frame, width=5)
            entry.grid(row=row, column=column + 1, padx=2, pady=2)
            self.card_entries.append(entry)
        for index, entry in enumerate(self.card_entries):
            following = self.card_entries[index + 1] if index + 1 < len(self.card_entries) else None
            self._limit_digits(entry, CARD_GROUP_SIZE, following)

    def _limit_digits(self, entry: tk.Entry, length: int, following: Optional[tk.Entry] = None) -> None:
        def on_key(_event) -> None:
            value = digits_only(entry.get(), length)
            if value != entry.get():
                entry.delete(0, tk.END)
                entry.insert(0, value)
            if following is not None and len(value) == length:
                following.focus_set()
                following.icursor(tk.END)

        entry.bind("<KeyRelease>", on_key)

    def grid(self, **options) -> None:
        self.frame.grid(**options)

    def pack(self, **options) -> None:
        self.frame.pack(**options)

    def values(self) -> Dict[str, str]:
        data = {name: entry.get().strip() for name, entry in self.entries.items()}
        data["gender"] = self.gender.get()
        data["card"] = join_card(*(entry.get() for entry in self.card_entries))
        return data

    def fill(self, user: Optional[User]) -> None:
        self.clear()
        if user is None:
            self._apply_readonly()
            return
        for name, entry in self.entries.items():
            if name == "password":
                continue
            entry.insert(0, getattr(user, name, "") or "")
        self.gender.set(user.gender.value)
        if len(user.card or "") == CARD_GROUP_SIZE * 4:
            for index, entry in enumerate(self.card_entries):
                start = index * CARD_GROUP_SIZE
                entry.insert(0, user.card[start:start + CARD_GROUP_SIZE])
        self._apply_readonly()

    def clear(self) -> None:
        for entry in [*self.entries.values(), *self.card_entries]:
            entry.configure(state="normal", bg=NORMAL_COLOR)
            entry.delete(0, tk.END)
        self.gender.set(Gender.OTHER.value)

    def mark_invalid(self, fields: List[str]) -> None:
        for entry in [*self.entries.values(), *self.card_entries]:
            entry.configure(bg=NORMAL_COLOR)
        for field in fields:
            if field == "card":
                for entry in self.card_entries:
                    entry.configure(bg=ERROR_COLOR)
            elif field in self.entries:
                self.entries[field].configure(bg=ERROR_COLOR)

    def set_readonly(self, *names: str) -> None:
        self._readonly = [name for name in names if name in self.entries]
        self._apply_readonly()

    def _apply_readonly(self) -> None:
        for name in self._readonly:
            self.entries[name].configure(state="readonly")
