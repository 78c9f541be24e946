"""Command-line front end.

    twolink fk --l1 100 --l2 80 --angle1 30 --angle2 45
    twolink ik --l1 100 --l2 80 --x 100 --y 50 --plot arm.png
"""

import argparse
import logging
import sys
from typing import List, Optional

from twolink.kinematics import ElbowBranch, InvalidArmConfig
from twolink.session import ArmSession, Mode

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREACHABLE = 2


def build_parser() -> argparse.ArgumentParser:
    defaults = ArmSession()

    parser = argparse.ArgumentParser(
        prog='twolink', description="Two-link planar arm kinematics")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Enable debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--l1', type=float, default=defaults.length1,
                        help="Length of link 1 (base to elbow)")
    common.add_argument('--l2', type=float, default=defaults.length2,
                        help="Length of link 2 (elbow to end-effector)")
    common.add_argument('--plot', metavar='PATH',
                        help="Save a drawing of the arm to PATH")

    sub = parser.add_subparsers(dest='mode', required=True)

    fk = sub.add_parser('fk', parents=[common],
                        help="Joint angles (degrees) -> end-effector position")
    fk.add_argument('--angle1', type=float, default=defaults.angle1)
    fk.add_argument('--angle2', type=float, default=defaults.angle2)

    ik = sub.add_parser('ik', parents=[common],
                        help="Target position -> joint angles (degrees)")
    ik.add_argument('--x', type=float, default=defaults.target_x)
    ik.add_argument('--y', type=float, default=defaults.target_y)
    ik.add_argument('--elbow-down', action='store_true',
                    help="Return the elbow-down solution instead of elbow-up")

    return parser


def session_from_args(args: argparse.Namespace) -> ArmSession:
    session = ArmSession(mode=Mode(args.mode), length1=args.l1, length2=args.l2)
    if session.mode is Mode.FK:
        session.angle1 = args.angle1
        session.angle2 = args.angle2
    else:
        session.target_x = args.x
        session.target_y = args.y
        if args.elbow_down:
            session.branch = ElbowBranch.ELBOW_DOWN
    return session


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    session = session_from_args(args)
    try:
        frame = session.snapshot()
    except InvalidArmConfig as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    print(frame.text)

    if args.plot:
        # Imported lazily so plain solves don't pay for matplotlib
        from twolink.render import save_arm
        save_arm(args.plot, frame.layout, target=frame.target, title=frame.text)

    if frame.ik_result is not None and not frame.ik_result.reachable:
        logger.warning("Target (%.2f, %.2f) is outside reach [%.2f, %.2f]",
                       session.target_x, session.target_y,
                       frame.ik_result.min_reach, frame.ik_result.max_reach)
        return EXIT_UNREACHABLE
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
