"""Modelos de domínio das contas.

Estruturas simples, sem dependência de banco, compartilhadas pelas
implementações SQL, Mongo e em memória.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from models.enums import Gender


@dataclass
class Profile(ABC):
    email: str = ""
    username: str = ""
    password: str = ""
    name: str = ""
    lastname: str = ""
    telephone: str = ""
    id: int = -1

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.lastname}".strip()

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Email: {self.email}, Username: {self.username}, "
            f"Name: {self.name}, Last name: {self.lastname}, Telephone: {self.telephone}"
        )

    @abstractmethod
    def show(self) -> str:
        """Texto curto usado nas listas da interface."""


@dataclass
class User(Profile):
    gender: Gender = Gender.OTHER
    card: str = ""

    def __post_init__(self) -> None:
        self.gender = Gender.parse(self.gender)

    def show(self) -> str:
        return f"{self.username} ({self.email})"

    def __str__(self) -> str:
        return f"{super().__str__()}, Gender: {self.gender.value}, Card: {self.card}"


@dataclass
class Admin(Profile):
    current_account: str = ""

    def show(self) -> str:
        return f"{self.username} [admin]"

    def __str__(self) -> str:
        return f"{super().__str__()}, Current account: {self.current_account}"
