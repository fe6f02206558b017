import tkinter as tk
from tkinter import messagebox

_ALERTS = {
    "error": messagebox.showerror,
    "warning": messagebox.showwarning,
    "info": messagebox.showinfo,
}


def show_alert(title: str, message: str, kind: str = "error") -> None:
    _ALERTS.get(kind, messagebox.showinfo)(title, message)


def clear(master: tk.Misc) -> None:
    for child in master.winfo_children():
        child.destroy()


def labeled_entry(frame: tk.Frame, text: str, row: int, **entry_options) -> tk.Entry:
    tk.Label(frame, text=text).grid(row=row, column=0, sticky="w", padx=5, pady=2)
    entry = tk.Entry(frame, **entry_options)
    entry.grid(row=row, column=1, columnspan=4, sticky="ew", padx=5, pady=2)
    return entry
