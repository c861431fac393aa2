"""Utility script to create a registered user, e.g. an administrator account."""

from __future__ import annotations

import argparse
from datetime import date
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users import register_user
from app.config import get_settings
from app.domain.entities import UserRole
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create a registered user for the notification feed API.",
    )
    parser.add_argument(
        "--name",
        default="Administrador",
        help="Nombre completo del usuario (por defecto: Administrador)",
    )
    parser.add_argument(
        "--email",
        required=True,
        help="Correo electrónico del usuario",
    )
    parser.add_argument(
        "--birth-date",
        type=date.fromisoformat,
        required=True,
        help="Fecha de nacimiento en formato AAAA-MM-DD",
    )
    parser.add_argument(
        "--role",
        choices=[role.value for role in UserRole],
        default=UserRole.FRONTEND.value,
        help="Función del usuario (por defecto: frontend)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Contraseña del usuario. Si no se proporciona se solicitará interactivamente.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Ingrese la contraseña del usuario: ")
    if len(password) < 6:
        raise SystemExit("La contraseña debe tener al menos 6 caracteres.")

    initialize_database()

    session = SessionLocal()
    try:
        user = register_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            birth_date=args.birth_date,
            role=UserRole(args.role),
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"No se pudo crear el usuario: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error al guardar el usuario en la base de datos: {exc}") from exc
    else:
        is_admin = user.email in get_settings().admin_emails
        print(
            "Usuario creado exitosamente:\n"
            f"  ID: {user.id}\n"
            f"  Nombre: {user.name}\n"
            f"  Email: {user.email}\n"
            f"  Administrador: {'sí' if is_admin else 'no (agregue el correo a ADMIN_EMAILS)'}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
