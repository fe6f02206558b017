import logging
import tkinter as tk

from core.config import Settings
from core.errors import AppError
from database.mongo import close_client
from services.controller import Controller
from ui.common import show_alert
from ui.login_window import LoginWindow


def main():
    settings = Settings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    root = tk.Tk()
    try:
        controller = Controller()
    except AppError as e:
        root.withdraw()
        show_alert("Error", str(e))
        root.destroy()
        return

    LoginWindow(root, controller)
    try:
        root.mainloop()
    finally:
        close_client()


if __name__ == "__main__":
    main()
