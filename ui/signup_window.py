import tkinter as tk

from core.errors import AppError, ValidationError
from models import User
from services.validation import validate_signup
from services.controller import Controller
from ui.common import clear, show_alert
from ui.profile_form import ProfileForm


class SignUpWindow:
    def __init__(self, root: tk.Tk, controller: Controller):
        self.root = root
        self.controller = controller
        clear(self.root)
        self.root.title("Sign Up")
        self.root.geometry("420x380")

        tk.Label(root, text="Create your account", font=("Arial", 12, "bold")).pack(pady=10)
        self.form = ProfileForm(root)
        self.form.pack(padx=10)

        buttons = tk.Frame(root)
        buttons.pack(pady=10)
        tk.Button(buttons, text="Sign Up", width=12, command=self.sign_up).grid(row=0, column=0, padx=5)
        tk.Button(buttons, text="Back to Log In", width=12, command=self.open_login).grid(row=0, column=1, padx=5)

    def sign_up(self):
        data = self.form.values()
        try:
            validate_signup(data)
        except ValidationError as e:
            self.form.mark_invalid(e.fields)
            show_alert("Validation Error", str(e))
            return

        user = User(
            email=data["email"],
            username=data["username"],
            password=data["password"],
            name=data["name"],
            lastname=data["lastname"],
            telephone=data["telephone"],
            gender=data["gender"],
            card=data["card"],
        )
        try:
            self.controller.register(user)
            logged = self.controller.login(data["username"], data["password"])
        except AppError as e:
            show_alert("Error", str(e))
            return

        if logged is None:
            show_alert("Error", "Account created but login failed.")
            return

        from ui.user_window import UserWindow

        UserWindow(self.root, self.controller)
        show_alert("Success", "Account created successfully!", "info")

    def open_login(self):
        from ui.login_window import LoginWindow

        LoginWindow(self.root, self.controller)
