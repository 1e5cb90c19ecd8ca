"""
paillier_crypto — Live Demo: Encrypted Tally
=============================================
Run:  python examples/demo_paillier.py [bit_length]

Generates a key pair, encrypts a handful of votes, sums them without
decrypting, scales a ciphertext, and prints timings for each step.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from paillier_crypto import generate_random_keys

LINE  = "═" * 70
BITS  = int(sys.argv[1]) if len(sys.argv) > 1 else 2048
VOTES = [1, 0, 1, 1, 0, 1, 1]

def header(step, name):
    print(f"\n{LINE}")
    print(f"  Step {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=" %(name)s: %(message)s")

print(f"\n{LINE}")
print("  paillier_crypto — Homomorphic Tally Demo")
print(LINE)

# ── KEYS ─────────────────────────────────────────────────────────────────────
for simple in (False, True):
    header("1" + ("b" if simple else "a"),
           f"KEY GENERATION — {BITS} bits, {'g = n+1' if simple else 'random g'}")
    t0        = time.perf_counter()
    pub, priv = generate_random_keys(BITS, simple_variant=simple)
    elapsed   = time.perf_counter() - t0
    ok("Modulus",     f"{pub.bit_length} bits")
    ok("Fingerprint", pub.fingerprint()[:32] + "...")
    ok("Generated",   f"{elapsed*1000:.0f} ms")

# ── ENCRYPT ──────────────────────────────────────────────────────────────────
header(2, "ENCRYPT — one ciphertext per vote")
t0      = time.perf_counter()
ballots = [pub.encrypt(v) for v in VOTES]
elapsed = time.perf_counter() - t0
ok("Votes",       str(VOTES))
ok("Ciphertext",  f"{(ballots[0].bit_length() + 7) // 8} bytes each")
ok("Encrypted",   f"{elapsed*1000:.1f} ms for {len(VOTES)}")
ok("Same vote, different ciphertext", str(ballots[0] != ballots[2]))

# ── ADD ──────────────────────────────────────────────────────────────────────
header(3, "HOMOMORPHIC ADDITION — tally without decrypting a ballot")
t0      = time.perf_counter()
tally   = pub.addition(*ballots)
elapsed = time.perf_counter() - t0
ok("Tally",   str(priv.decrypt(tally)))
ok("Expected", str(sum(VOTES)))
ok("Added",   f"{elapsed*1000:.2f} ms")

# ── MULTIPLY ─────────────────────────────────────────────────────────────────
header(4, "SCALAR MULTIPLICATION — weight the tally")
for k in (0, 1, 3):
    scaled = pub.multiply(tally, k)
    ok(f"tally × {k}", f"{priv.decrypt(scaled)}  (ciphertext changed: {scaled != tally})")

print(f"\n{LINE}")
print("  DEMO COMPLETE")
print(LINE + "\n")
