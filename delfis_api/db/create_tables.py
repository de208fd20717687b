"""Create (or recreate) the SQL schema: ``python -m delfis_api.db.create_tables [--reset]``."""
from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from delfis_api.core.logging_config import configure_logging

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def create_all() -> None:
    Base.metadata.create_all(bind=get_engine())


def drop_all() -> None:
    Base.metadata.drop_all(bind=get_engine())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Cria as tabelas da Delfis API.")
    parser.add_argument("--reset", action="store_true", help="apaga as tabelas antes de criar")
    args = parser.parse_args(argv)
    configure_logging()
    try:
        if args.reset:
            drop_all()
            logger.info("Tabelas removidas.")
        create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Falha ao criar as tabelas: {exc}") from exc
    print("Tabelas criadas com sucesso.")


if __name__ == "__main__":
    main()
