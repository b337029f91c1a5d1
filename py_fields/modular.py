import gmpy2

from .exceptions import NonResidueError


# Modular inverse of a mod n. Raises ZeroDivisionError if a has no
# inverse (in particular for a == 0)
def mod_inverse(a, n):
    return int(gmpy2.invert(a, n))


def mod_exp(base, exponent, n):
    assert exponent >= 0
    return int(gmpy2.powmod(base, exponent, n))


def legendre(a, p):
    """
    Legendre symbol
    Define if a is a quadratic residue modulo odd prime
    http://en.wikipedia.org/wiki/Legendre_symbol
    """
    return int(gmpy2.jacobi(a % p, p))


def mod_sqrt(a, p):
    """
    Square root modulo prime number
    Solve the equation
        x^2 = a mod p
    and return one solution x (the other one is p - x)
    http://en.wikipedia.org/wiki/Tonelli-Shanks_algorithm

    For p = 3 mod 4 the closed form a^((p+1)/4) is returned without
    checking that a is a residue; for a non-residue it squares to -a.
    """
    a %= p

    # Simple cases
    if a == 0:
        return 0
    if p == 2:
        return a
    if p % 4 == 3:
        return mod_exp(a, (p + 1) // 4, p)

    # Check solution existence on odd prime
    if legendre(a, p) != 1:
        raise NonResidueError("%d is not a quadratic residue mod %d" % (a, p))

    # Factor p-1 on the form q * 2^s (with q odd)
    q, s = p - 1, 0
    while q % 2 == 0:
        s += 1
        q //= 2

    # Select a z which is a quadratic non residue modulo p
    z = 2
    while legendre(z, p) != -1:
        z += 1
    c = mod_exp(z, q, p)

    # Search for a solution
    x = mod_exp(a, (q + 1) // 2, p)
    t = mod_exp(a, q, p)
    m = s
    while t != 1:
        # Find the lowest i such that t^(2^i) = 1
        i, t2 = 1, t * t % p
        while t2 != 1:
            t2 = t2 * t2 % p
            i += 1

        # Update next value to iterate
        b = mod_exp(c, 2 ** (m - i - 1), p)
        x = (x * b) % p
        t = (t * b * b) % p
        c = (b * b) % p
        m = i

    return x
