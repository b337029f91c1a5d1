import pytest

from py_fields import build_fields, extension_field, prime_field

# alt_bn128, the curve behind the EVM pairing precompile
BN128_PROPERTIES = {
    "field_modulus": 21888242871839275222246405745257275088696311157297823662689037894645226208583,
    "fq2_modulus_coeffs": (1, 0),
    "fq12_modulus_coeffs": (82, 0, 0, 0, 0, 0, -18, 0, 0, 0, 0, 0),  # Implied + [1]
}


@pytest.fixture
def bn128():
    return build_fields(BN128_PROPERTIES)


@pytest.fixture
def f59():
    return prime_field(59)


# x^2 + 1 is irreducible mod 59 since 59 = 3 mod 4
@pytest.fixture
def f59_2(f59):
    return extension_field(f59, (1, 0))


# The 2-3-2 tower: FQ2 = FQ[u]/(u^2 + 1), FQ6 = FQ2[v]/(v^3 - (9 + u)),
# FQ12 = FQ6[w]/(w^2 - v)
@pytest.fixture
def bn128_tower(bn128):
    fq2 = bn128["FQ2"]
    fq6 = extension_field(fq2, (fq2([-9, -1]), 0, 0))
    fq12 = extension_field(fq6, (fq6([0, -1, 0]), 0))
    return bn128["FQ"], fq2, fq6, fq12
