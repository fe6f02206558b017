"""Fluxo de exclusão de conta: senha, confirmação e código CAPTCHA.

Cada etapa corresponde a uma janela da interface. O código CAPTCHA é um número
entre 0 e 9999 e é trocado a cada tentativa errada.
"""
from __future__ import annotations

import random
from enum import Enum
from typing import Callable, Optional

from core.errors import AppError, ErrorMessages
from models import Profile
from services.auth_service import verify_password
from services.controller import Controller

CAPTCHA_LIMIT = 10000
SELF = -1


class DeletionStep(str, Enum):
    VERIFY_PASSWORD = "VERIFY_PASSWORD"
    CONFIRM_ACTION = "CONFIRM_ACTION"
    CAPTCHA = "CAPTCHA"
    DONE = "DONE"


class DeletionFlow:
    def __init__(
        self,
        controller: Controller,
        target_id: int = SELF,
        on_deleted: Optional[Callable[[], None]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        profile = controller.current_profile()
        if profile is None:
            raise AppError("No profile is logged in.")
        self.controller = controller
        self.profile: Profile = profile
        self.target_id = target_id
        self.on_deleted = on_deleted
        self.rng = rng or random.Random()
        self.step = DeletionStep.VERIFY_PASSWORD
        self.code: Optional[int] = None
        self.error: str = ""

    @property
    def username(self) -> str:
        return self.profile.username

    @property
    def deletes_self(self) -> bool:
        return self.target_id == SELF or self.target_id == self.profile.id

    def _expect(self, step: DeletionStep) -> None:
        if self.step != step:
            raise AppError(f"Deletion step {step.value} is not available now.")

    def verify_password(self, password: str) -> bool:
        self._expect(DeletionStep.VERIFY_PASSWORD)
        password = (password or "").strip()
        if not password:
            self.error = "Enter your password."
            return False
        if not verify_password(password, self.profile.password):
            self.error = "Incorrect password."
            return False
        self.error = ""
        self.step = DeletionStep.CONFIRM_ACTION
        return True

    def confirm_action(self) -> int:
        self._expect(DeletionStep.CONFIRM_ACTION)
        self.step = DeletionStep.CAPTCHA
        return self.new_code()

    def new_code(self) -> int:
        self.code = self.rng.randrange(CAPTCHA_LIMIT)
        return self.code

    def submit_captcha(self, value: str) -> bool:
        """Confere o código e exclui a conta; ``False`` quando o código não confere."""
        self._expect(DeletionStep.CAPTCHA)
        value = (value or "").strip()
        if not value:
            self.error = "Please enter the code."
            return False
        if value != str(self.code):
            self.error = "Incorrect code. Try again."
            self.new_code()
            return False

        user_id = self.profile.id if self.deletes_self else self.target_id
        if not self.controller.delete_user(user_id):
            raise AppError(ErrorMessages.DELETE_USER)
        self.error = ""
        self.step = DeletionStep.DONE
        if self.on_deleted is not None:
            self.on_deleted()
        return True


__all__ = ["DeletionFlow", "DeletionStep", "CAPTCHA_LIMIT"]
