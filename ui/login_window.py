import tkinter as tk

from core.errors import AppError
from models import Admin
from services.controller import Controller
from ui.common import clear, show_alert


class LoginWindow:
    def __init__(self, root: tk.Tk, controller: Controller):
        self.root = root
        self.controller = controller
        clear(self.root)
        self.root.title("Log In")
        self.root.geometry("320x220")
        self.root.resizable(False, False)

        tk.Label(root, text="Email or username").pack(pady=5)
        self.credential_entry = tk.Entry(root)
        self.credential_entry.pack()

        tk.Label(root, text="Password").pack(pady=5)
        self.password_entry = tk.Entry(root, show="*")
        self.password_entry.pack()
        self.password_entry.bind("<Return>", lambda _e: self.login())

        tk.Button(root, text="Log In", width=15, command=self.login).pack(pady=(15, 5))
        tk.Button(root, text="Sign Up", width=15, command=self.open_signup).pack()

    def login(self):
        credential = self.credential_entry.get().strip()
        password = self.password_entry.get().strip()
        if not credential or not password:
            show_alert("Error", "Please fill all the fields.")
            return

        try:
            profile = self.controller.login(credential, password)
        except AppError as e:
            show_alert("Error", str(e))
            return

        if profile is None:
            show_alert("Error", "Incorrect credentials.")
            return

        if isinstance(profile, Admin):
            from ui.admin_window import AdminWindow

            AdminWindow(self.root, self.controller)
        else:
            from ui.user_window import UserWindow

            UserWindow(self.root, self.controller)

    def open_signup(self):
        from ui.signup_window import SignUpWindow

        SignUpWindow(self.root, self.controller)
