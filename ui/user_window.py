import tkinter as tk

from core.errors import AppError, ValidationError
from models import User
from services.controller import Controller, edited_user
from services.validation import validate_profile_update
from ui.common import clear, show_alert
from ui.deletion_dialog import DeletionDialog
from ui.profile_form import ProfileForm


class UserWindow:
    def __init__(self, root: tk.Tk, controller: Controller):
        self.root = root
        self.controller = controller
        self.user: User = controller.current_profile()
        clear(self.root)
        self.root.title("User")
        self.root.geometry("420x400")

        tk.Label(root, text=f"Welcome, {self.user.full_name or self.user.username}", font=("Arial", 12)).pack(pady=10)
        tk.Label(root, text="Leave the password empty to keep the current one.", fg="gray").pack()

        self.form = ProfileForm(root)
        self.form.pack(padx=10)
        self.form.set_readonly("username", "email")
        self.form.fill(self.user)

        buttons = tk.Frame(root)
        buttons.pack(pady=10)
        tk.Button(buttons, text="Save changes", width=12, command=self.save).grid(row=0, column=0, padx=5)
        tk.Button(buttons, text="Delete account", width=12, command=self.delete).grid(row=0, column=1, padx=5)
        tk.Button(buttons, text="Log out", width=12, command=self.logout).grid(row=0, column=2, padx=5)

    def save(self):
        data = self.form.values()
        try:
            validate_profile_update(data)
        except ValidationError as e:
            self.form.mark_invalid(e.fields)
            show_alert("Validation Error", str(e))
            return

        user = edited_user(self.user, data)
        try:
            updated = self.controller.update_user(user)
        except AppError as e:
            show_alert("Error", str(e))
            return

        if updated:
            self.user = user
            self.controller.logged.set_profile(user)
            self.form.fill(self.user)
            show_alert("Success", "User updated successfully.", "info")
        else:
            show_alert("Error", "Could not update user.")

    def delete(self):
        try:
            DeletionDialog(self.root, self.controller, on_deleted=self.logout)
        except AppError as e:
            show_alert("Error", str(e))

    def logout(self):
        from ui.login_window import LoginWindow

        self.controller.logout()
        LoginWindow(self.root, self.controller)
