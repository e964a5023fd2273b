import argparse
import sys

from PyLinComp.Synthesis import (
    InvalidInput,
    berlekamp_massey,
    berlekamp_massey_dense,
    linear_complexity_profile,
    parse_bitstring,
)


def parse_sequence(values):
    # "1 0 1 1" as separate arguments, or a single "1011"
    return parse_bitstring("".join(values))


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='pylincomp',
        description='Find the shortest LFSR generating a binary sequence (Berlekamp-Massey)'
    )
    parser.add_argument('sequence', metavar='BIT', nargs='*',
                        help='Bits of the sequence, as separate arguments or one bit string')
    parser.add_argument('--dense', action='store_true',
                        help='Use the compiled dense implementation')
    parser.add_argument('--profile', action='store_true',
                        help='Also print the linear complexity profile')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print progress while synthesizing')
    args = parser.parse_args(argv)

    try:
        seq = parse_sequence(args.sequence)
    except InvalidInput as e:
        parser.error(str(e))

    synthesize = berlekamp_massey_dense if args.dense else berlekamp_massey
    poly, L = synthesize(seq, verbose=args.verbose)

    print(f"Input Sequence:\t{seq}")
    print(f"\tResult:\t{poly}\n\tLength:\t{L}")

    if args.profile:
        for n, new_L in linear_complexity_profile(seq):
            print(f"\tn = {n}:\tL = {new_L}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
