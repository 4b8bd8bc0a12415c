# Generator polynomial (x^32 + x^26 + x^23 + x^22 + x^16 + x^12 + x^11 + x^10
# + x^8 + x^7 + x^5 + x^4 + x^2 + x + 1), MSB-first, not reflected
POLYNOMIAL = 0x04C11DB7

INITIAL_VALUE = 0
MASK32 = 0xFFFFFFFF
TOP_BIT = 0x80000000

TABLE_SIZE = 256


# Check value for this parameterisation (init 0, no reflection, no xorout).
# Equals CRC-32/CKSUM's 0x765E7680 with its final XOR undone.
CHECK_INPUT = b"123456789"
CHECK_VALUE = 0x89A1897F
