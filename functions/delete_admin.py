r"""
Elimina un admin: utente Firebase Auth + admin_profiles/{uid} + admins/{uid}.

Uso (serviceAccountKey.json richiesto, come per create_admin.py):
  python delete_admin.py
Chiede l'email e una conferma esplicita "yes".
"""
import logging
import sys

from admin_accounts import delete_admin_account, find_admin_by_email
from admin_backend import configure_logging, open_script_backend
from admin_errors import translate_error

logger = logging.getLogger(__name__)


def run(backend, prompt=input):
    try:
        email = prompt("Email dell'admin da eliminare: ").strip()
        user = find_admin_by_email(backend, email)

        print("\n⚠️  Stai per eliminare:")
        print(f"   Nome: {user.display_name}")
        print(f"   Email: {user.email}")
        print(f"   UID: {user.uid}")

        confirm = prompt("\nSei sicuro? (yes/no): ")
        if confirm.lower() != "yes":
            print("\n❌ Operazione annullata.")
            return 0

        delete_admin_account(backend, user.uid)
        print("\n✅ Admin eliminato con successo!")
    except Exception as e:
        err = translate_error(e)
        logger.warning("admin deletion failed: %s", err.message)
        print(f"\n❌ Errore: {err.message}")
    return 0


def main(prompt=input, backend=None):
    configure_logging()
    try:
        if backend is None:
            backend = open_script_backend()
        return run(backend, prompt)
    except Exception as e:
        logger.exception("fatal error")
        print(f"Errore fatale: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
