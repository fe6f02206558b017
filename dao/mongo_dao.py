"""Implementação do ``ModelDAO`` sobre a coleção ``profiles`` do MongoDB.

Um documento é de usuário quando tem a chave ``gender``; os de administrador
trazem ``currentAccount``. Os ids são inteiros sequenciais em ``_id``.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from core.errors import AppError, ErrorMessages
from dao.base import ModelDAO, duplicate_message
from models import Admin, Gender, LoggedProfile, Profile, User, logged_profile
from services.auth_service import hash_password, prepare_password, verify_password

logger = logging.getLogger(__name__)

COLLECTION = "profiles"


def _profile_fields(doc: dict) -> dict:
    return {
        "id": doc.get("_id", -1),
        "email": doc.get("email", ""),
        "username": doc.get("username", ""),
        "password": doc.get("password", ""),
        "name": doc.get("name", ""),
        "lastname": doc.get("lastname", ""),
        "telephone": doc.get("telephone", ""),
    }


def _to_profile(doc: dict) -> Profile:
    if "gender" in doc:
        return User(gender=Gender.parse(doc.get("gender")), card=doc.get("card", ""), **_profile_fields(doc))
    return Admin(current_account=doc.get("currentAccount", ""), **_profile_fields(doc))


class MongoProfileDAO(ModelDAO):
    def __init__(self, collection: Optional[Collection] = None, logged: Optional[LoggedProfile] = None) -> None:
        if collection is None:
            from database.mongo import get_database

            collection = get_database()[COLLECTION]
        self.collection = collection
        self.logged = logged or logged_profile

    def _next_id(self) -> int:
        last = self.collection.find_one({}, sort=[("_id", DESCENDING)], projection={"_id": 1})
        return int(last["_id"]) + 1 if last else 1

    def login(self, credential: str, password: str) -> Optional[Profile]:
        try:
            doc = self.collection.find_one({"$or": [{"username": credential}, {"email": credential}]})
        except PyMongoError as exc:
            raise AppError(ErrorMessages.LOGIN) from exc
        if doc is None or not verify_password(password, doc.get("password", "")):
            logger.info("Login sem correspondência para %s", credential)
            return None
        profile = _to_profile(doc)
        self.logged.set_profile(profile)
        return profile

    def get_users(self) -> List[User]:
        try:
            docs = list(self.collection.find({"gender": {"$exists": True}}).sort("_id"))
        except PyMongoError as exc:
            raise AppError(ErrorMessages.GET_USERS) from exc
        return [_to_profile(doc) for doc in docs]

    def register(self, user: User) -> User:
        try:
            existing = list(
                self.collection.find(
                    {"$or": [{"email": user.email}, {"username": user.username}]},
                    projection={"email": 1, "username": 1},
                )
            )
        except PyMongoError as exc:
            raise AppError(ErrorMessages.VERIFY_CREDENTIALS) from exc
        message = duplicate_message(
            any(doc.get("email") == user.email for doc in existing),
            any(doc.get("username") == user.username for doc in existing),
        )
        if message:
            raise AppError(message)

        password_hash = hash_password(user.password)
        try:
            new_id = self._next_id()
            self.collection.insert_one(
                {
                    "_id": new_id,
                    "email": user.email,
                    "username": user.username,
                    "password": password_hash,
                    "name": user.name,
                    "lastname": user.lastname,
                    "telephone": user.telephone,
                    "gender": user.gender.value,
                    "card": user.card,
                }
            )
        except PyMongoError as exc:
            logger.error("Falha ao cadastrar %s: %s", user.username, exc)
            raise AppError(ErrorMessages.REGISTER_USER) from exc
        user.id = new_id
        user.password = password_hash
        return user

    def update_user(self, user: User) -> bool:
        changes = {
            "name": user.name,
            "lastname": user.lastname,
            "telephone": user.telephone,
            "gender": user.gender.value,
            "card": user.card,
        }
        if user.password:
            changes["password"] = prepare_password(user.password)
        try:
            result = self.collection.update_one(
                {"_id": user.id, "gender": {"$exists": True}},
                {"$set": changes},
            )
        except PyMongoError as exc:
            raise AppError(ErrorMessages.UPDATE_USER) from exc
        if result.matched_count == 0:
            raise AppError(ErrorMessages.UPDATE_USER)
        if user.password:
            user.password = changes["password"]
        return True

    def delete_user(self, user_id: int) -> bool:
        try:
            result = self.collection.delete_one({"_id": user_id})
        except PyMongoError as exc:
            raise AppError(ErrorMessages.DELETE_USER) from exc
        return result.deleted_count > 0


__all__ = ["MongoProfileDAO"]
