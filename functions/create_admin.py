r"""
Crea un account admin per Longeviva (Firebase Auth + admin_profiles + admins).

Uso:
  1. Console Firebase > Impostazioni progetto > Account di servizio > "Genera nuova chiave privata"
  2. Salva il file in questa cartella come serviceAccountKey.json (o imposta SERVICE_ACCOUNT_KEY)
  3. Da terminale:
     cd functions
     python create_admin.py                                            (modalità interattiva)
     python create_admin.py "Nome Cognome" "email@example.com" "password"   (modalità diretta)
"""
import logging
import sys

from admin_accounts import (
    create_identity,
    grant_admin_claims,
    validate_admin_input,
    verify_admin_account,
    write_admin_documents,
)
from admin_backend import SHOW_PASSWORD_RECEIPT, configure_logging, open_script_backend
from admin_errors import translate_error

logger = logging.getLogger(__name__)

USAGE = 'Uso: python create_admin.py "Nome Cognome" "email@example.com" "password"'


def _password_line(password, show_password):
    return f"   Password: {password}" if show_password else "   Password: (non mostrata)"


def _print_error(err, header):
    print(header)
    print(f"   {err.message}")
    if err.hint:
        print(f"   {err.hint}")


def run_interactive(backend, prompt=input, show_password=SHOW_PASSWORD_RECEIPT):
    print("🚀 Creazione Admin per Longeviva\n")
    try:
        name = prompt("Nome completo dell'admin: ")
        email = prompt("Email: ")
        password = prompt("Password (min 8 caratteri): ")
        new_admin = validate_admin_input(name, email, password)

        print("\n⏳ Creazione admin in corso...\n")

        print("1️⃣ Creazione utente in Firebase Auth...")
        uid = create_identity(backend, new_admin)
        print(f"   ✅ Utente creato con UID: {uid}")

        print("\n2️⃣ Impostazione permessi admin...")
        grant_admin_claims(backend, uid)
        print("   ✅ Permessi admin assegnati")

        print("\n3️⃣ Creazione documenti in admin_profiles e admins...")
        write_admin_documents(backend, uid, new_admin)
        print("   ✅ Documenti creati")

        print("\n4️⃣ Verifica creazione...")
        report = verify_admin_account(backend, uid)
    except Exception as e:
        err = translate_error(e)
        logger.warning("admin creation failed: %s", err.message)
        _print_error(err, "\n❌ Errore durante la creazione admin:")
        print("\n💡 Suggerimento: Controlla i log sopra per maggiori dettagli.\n")
        return 0

    if not report.complete:
        print("   ⚠️  Attenzione: Verifica parzialmente fallita")
        print("   Admin claims:", "✅" if report.claims_ok else "❌")
        print("   Admin profile:", "✅" if report.profile_ok else "❌")
        print("   Admin doc:", "✅" if report.legacy_ok else "❌")
        return 0

    print("   ✅ Verifica completata con successo!")
    print("\n" + "=" * 50)
    print("🎉 ADMIN CREATO CON SUCCESSO!")
    print("=" * 50)
    print("\n📋 Riepilogo:")
    print(f"   Nome: {new_admin.name}")
    print(f"   Email: {new_admin.email}")
    print(_password_line(new_admin.password, show_password))
    print(f"   UID: {uid}")
    print("\n✨ Ora puoi accedere all'app Longeviva Admin con queste credenziali!")
    print("=" * 50 + "\n")
    return 0


def run_direct(backend, name, email, password, show_password=SHOW_PASSWORD_RECEIPT):
    print("🚀 Creazione Admin per Longeviva (modalità diretta)\n")
    try:
        new_admin = validate_admin_input(name, email, password)
        print(f"📝 Creazione admin per: {new_admin.name} ({new_admin.email})\n")
        uid = create_identity(backend, new_admin)
        grant_admin_claims(backend, uid)
        write_admin_documents(backend, uid, new_admin)
    except Exception as e:
        err = translate_error(e)
        logger.warning("admin creation failed: %s", err.message)
        _print_error(err, "\n❌ Errore:")
        return 0

    print("\n✅ Admin creato con successo!")
    print(f"   UID: {uid}")
    print(f"   Email: {new_admin.email}")
    print(_password_line(new_admin.password, show_password) + "\n")
    return 0


def main(argv=None, prompt=input, backend=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if args and len(args) != 3:
        print("❌ Parametri insufficienti!" if len(args) < 3 else "❌ Troppi parametri!")
        print(USAGE)
        print("Oppure: python create_admin.py (per modalità interattiva)")
        return 1

    configure_logging()
    try:
        if backend is None:
            backend = open_script_backend()
        if args:
            return run_direct(backend, *args)
        return run_interactive(backend, prompt)
    except Exception as e:
        logger.exception("fatal error")
        print(f"Errore fatale: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
