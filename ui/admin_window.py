import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from core.errors import AppError, ValidationError
from models import Admin, User
from services.controller import Controller, edited_user
from services.validation import validate_profile_update
from ui.common import clear, show_alert
from ui.deletion_dialog import DeletionDialog
from ui.profile_form import ProfileForm


class AdminWindow:
    def __init__(self, root: tk.Tk, controller: Controller):
        self.root = root
        self.controller = controller
        self.admin: Admin = controller.current_profile()
        self.users: List[User] = []
        self.selected: Optional[User] = None
        clear(self.root)
        self.root.title("Admin")
        self.root.geometry("460x440")

        tk.Label(root, text=f"Admin: {self.admin.username}", font=("Arial", 12)).pack(pady=10)

        self.users_combo = ttk.Combobox(root, state="readonly", width=40)
        self.users_combo.pack(pady=5)
        self.users_combo.bind("<<ComboboxSelected>>", lambda _e: self.select_user())

        self.form = ProfileForm(root)
        self.form.pack(padx=10)
        self.form.set_readonly("username", "email")

        buttons = tk.Frame(root)
        buttons.pack(pady=10)
        tk.Button(buttons, text="Save changes", width=12, command=self.save).grid(row=0, column=0, padx=5)
        tk.Button(buttons, text="Delete user", width=12, command=self.delete).grid(row=0, column=1, padx=5)
        tk.Button(buttons, text="Log out", width=12, command=self.logout).grid(row=0, column=2, padx=5)

        self.load_users()

    def load_users(self):
        try:
            self.users = self.controller.get_users()
        except AppError as e:
            show_alert("Error", str(e))
            self.users = []
        self.users_combo["values"] = [user.show() for user in self.users]
        self.users_combo.set("")
        self.selected = None
        self.form.fill(None)

    def select_user(self):
        index = self.users_combo.current()
        self.selected = self.users[index] if 0 <= index < len(self.users) else None
        self.form.fill(self.selected)

    def save(self):
        if self.selected is None:
            show_alert("Error", "Please select a user to update.")
            return

        data = self.form.values()
        try:
            validate_profile_update(data)
        except ValidationError as e:
            self.form.mark_invalid(e.fields)
            show_alert("Validation Error", str(e))
            return

        user = edited_user(self.selected, data)
        try:
            updated = self.controller.update_user(user)
        except AppError as e:
            show_alert("Error", str(e))
            return

        if updated:
            show_alert("Success", "User updated successfully.", "info")
            self.load_users()
        else:
            show_alert("Error", "Could not update user.")

    def delete(self):
        if self.selected is None:
            show_alert("Error", "Please select a user to delete.")
            return
        try:
            DeletionDialog(self.root, self.controller, target_id=self.selected.id, on_deleted=self.load_users)
        except AppError as e:
            show_alert("Error", str(e))

    def logout(self):
        from ui.login_window import LoginWindow

        self.controller.logout()
        LoginWindow(self.root, self.controller)
