"""
griffinere — Live Demo
======================
Run:  python examples/demo_griffinere.py

Encrypts and decrypts a vCard, a spaced-out phrase and a padded short
message, printing ciphertext, lengths and timing for each.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from griffinere import Griffinere

LINE = "═" * 70
KEY  = "dHiNt8C8JY1RhZ26mtYCHByr0WzzfTLm"
VCARD = (
    "BEGIN:VCARD\nVERSION:3.0\nFN:Riley  Griffin\nN:Griffin;Riley;;;\nORG:\nTITLE:\n"
    "TEL;TYPE=work,voice:\nEMAIL;TYPE=internet:\nURL:\nBDAY:2025-05-15\nEND:VCARD"
)

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    print(f"\n{LINE}")
    print("  griffinere — Demo")
    print(LINE)

    g = Griffinere(KEY)

    # ── vCard ────────────────────────────────────────────────────────────────
    header("vCard round trip")
    t0 = time.perf_counter()
    ct = g.encrypt_string(VCARD)
    pt = g.decrypt_string(ct)
    elapsed = time.perf_counter() - t0
    ok("Encrypted",  ct[:48] + "...")
    ok("Lengths",    f"{len(VCARD)} chars -> {len(ct)} chars")
    ok("Round-trip", f"{elapsed*1000:.2f} ms")
    assert pt == VCARD
    ok("Decrypted matches original")

    # ── spaces ───────────────────────────────────────────────────────────────
    header("Space runs preserved")
    phrase = "Testing  Double   Triple Space"
    ct = g.encrypt_string(phrase)
    ok("Encrypted", ct)
    ok("Decrypted", repr(g.decrypt_string(ct)))

    # ── padding ──────────────────────────────────────────────────────────────
    header("Minimum-length padding")
    short = "Padding test case."
    ct = g.encrypt_string(short, 64)
    ok("Encrypted",  ct)
    ok("Length",     f"{len(ct)} (minimum 64)")
    ok("Decrypted",  g.decrypt_string(ct))

    print(f"\n{LINE}\n")
