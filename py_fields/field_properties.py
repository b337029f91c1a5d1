import re

from .exceptions import ShapeError
from .field_elements import extension_field, prime_field

# Extension moduli are given as `fq<N>_modulus_coeffs`, where N is the
# degree of the extension over the prime field
EXTENSION_KEY = re.compile(r'^fq(\d+)_modulus_coeffs$')


def validate_field_properties(properties):
    """
    Checks a field properties mapping of the form

        {
            "field_modulus": p,
            "fq2_modulus_coeffs": (1, 0),
            "fq12_modulus_coeffs": (82, 0, 0, 0, 0, 0, -18, 0, 0, 0, 0, 0),
        }

    and returns it unchanged. The modulus polynomials leave out the
    leading 1.
    """
    if 'field_modulus' not in properties:
        raise ValueError("field properties need a field_modulus")
    p = properties['field_modulus']
    if not isinstance(p, int) or p < 2:
        raise ValueError("field_modulus must be an integer > 1, got %r" % (p,))
    unknown = sorted(k for k in properties if k != 'field_modulus' and not EXTENSION_KEY.match(k))
    if unknown:
        raise ValueError("unknown field properties: %s" % ', '.join(unknown))
    for key, coeffs in properties.items():
        m = EXTENSION_KEY.match(key)
        if m is None:
            continue
        if isinstance(coeffs, (str, bytes)) or len(coeffs) == 0 or not all(isinstance(c, int) for c in coeffs):
            raise ValueError("%s must be a non-empty sequence of integers" % key)
        if int(m.group(1)) != len(coeffs):
            raise ShapeError("%s has %d coefficients" % (key, len(coeffs)))
    return properties


# Builds the prime field and one extension of it per modulus polynomial,
# keyed "FQ", "FQ2", "FQ12", ...
def build_fields(properties):
    validate_field_properties(properties)
    fq = prime_field(properties['field_modulus'])
    fields = {'FQ': fq}
    for key, coeffs in properties.items():
        m = EXTENSION_KEY.match(key)
        if m is not None:
            name = 'FQ' + m.group(1)
            fields[name] = extension_field(fq, coeffs, name=name)
    return fields
