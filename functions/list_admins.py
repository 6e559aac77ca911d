"""Stampa gli utenti Firebase Auth con il custom claim admin=True."""
import logging
import sys

from admin_accounts import format_admin_summary, list_admin_users
from admin_backend import configure_logging, open_script_backend
from admin_errors import translate_error

logger = logging.getLogger(__name__)


def run(backend):
    print("📋 Lista degli Admin esistenti:\n")
    try:
        admins = list_admin_users(backend)
        if not admins:
            print("❌ Nessun admin trovato nel sistema.")
            return 0

        print(f"Trovati {len(admins)} admin:\n")
        for user in admins:
            print("-" * 50)
            for line in format_admin_summary(user):
                print(line)
        print("-" * 50)
    except Exception as e:
        err = translate_error(e)
        logger.warning("listing admins failed: %s", err.message)
        print(f"❌ Errore: {err.message}")
    return 0


def main(backend=None):
    configure_logging()
    try:
        if backend is None:
            backend = open_script_backend()
        return run(backend)
    except Exception as e:
        logger.exception("fatal error")
        print(f"Errore fatale: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
