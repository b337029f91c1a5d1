# Utility methods for polynomial math. Polynomials are lists of field
# elements, lowest degree first.


# Index of the highest nonzero coefficient; the zero polynomial has
# degree 0
def deg(p):
    d = len(p) - 1
    while d and p[d] == 0:
        d -= 1
    return d


def zeros(n, field):
    return [field.zero() for i in range(n)]


# Polynomial long division, keeping the quotient and dropping the
# remainder
def poly_rounded_div(a, b):
    dega = deg(a)
    degb = deg(b)
    temp = [x for x in a]
    o = [x * 0 for x in a]
    for i in range(dega - degb, -1, -1):
        o[i] += temp[degb + i] / b[degb]
        for c in range(degb + 1):
            temp[c + i] -= o[i] * b[c]
    return o[:deg(o) + 1]
