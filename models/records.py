"""Tabelas SQL mapeadas com SQLAlchemy (schema db_profile / db_user / db_admin)."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from database.db import Base


class ProfileRecord(Base):
    __tablename__ = "db_profile"

    id = Column("P_ID", Integer, primary_key=True, autoincrement=True)
    email = Column("P_EMAIL", String(255), unique=True, nullable=False)
    username = Column("P_USERNAME", String(50), unique=True, nullable=False)
    password = Column("P_PASSWORD", String(255), nullable=False)
    name = Column("P_NAME", String(100))
    lastname = Column("P_LASTNAME", String(100))
    telephone = Column("P_TELEPHONE", String(9))


class UserRecord(Base):
    __tablename__ = "db_user"

    id = Column("U_ID", Integer, ForeignKey("db_profile.P_ID", ondelete="CASCADE"), primary_key=True)
    gender = Column("U_GENDER", String(10))
    card = Column("U_CARD", String(16))


class AdminRecord(Base):
    __tablename__ = "db_admin"

    id = Column("A_ID", Integer, ForeignKey("db_profile.P_ID", ondelete="CASCADE"), primary_key=True)
    current_account = Column("A_CURRENT_ACCOUNT", String(34))


class LogRecord(Base):
    __tablename__ = "db_log"

    id = Column("L_ID", Integer, primary_key=True, autoincrement=True)
    action = Column("L_ACTION", String(50), nullable=False)
    username = Column("L_USERNAME", String(50))
    details = Column("L_DETAILS", String(255))
    created_at = Column("L_CREATED_AT", DateTime, server_default=func.now())
