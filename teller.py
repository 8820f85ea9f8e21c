import sys
import logging
import argparse
from dotenv import load_dotenv
from bank_account.models.exceptions import BankError
from bank_account.services.bank_service import BankService
from config.settings import Settings

OPERATIONS = ('deposit', 'withdraw')


def setup_logging(settings: Settings) -> logging.Logger:
    logger = logging.getLogger('bank_account')
    logger.setLevel(settings.log_level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='a')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    logger.addHandler(handler)
    return logger


def _pairs(parser, operations):
    if len(operations) % 2:
        parser.error('operations come in pairs: deposit|withdraw AMOUNT')
    steps = []
    for op, amount in zip(operations[::2], operations[1::2]):
        if op not in OPERATIONS:
            parser.error(f'unknown operation {op!r}, expected deposit or withdraw')
        steps.append((op, amount))
    return steps


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='teller',
        description='Open an account and run deposits and withdrawals against it.',
    )
    parser.add_argument('--first', default='', help='holder first name')
    parser.add_argument('--last', default='', help='holder last name')
    parser.add_argument('--national-id', default='', help='holder national identifier')
    parser.add_argument('--balance', default='0', help='opening balance')
    parser.add_argument(
        'operations',
        nargs='*',
        metavar='STEP',
        help='operation and amount pairs, e.g. deposit 25 withdraw 10',
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    steps = _pairs(parser, args.operations)

    load_dotenv()
    try:
        settings = Settings.load()
    except ValueError as err:
        parser.error(str(err))
    setup_logging(settings)

    bank = BankService(settings)
    try:
        account = bank.open_account(args.first, args.last, args.national_id, args.balance)
        for op, amount in steps:
            outcome = getattr(bank, op)(account, amount)
            print(outcome)
    except BankError as err:
        print(err, file=sys.stderr)
        return 2

    print(bank.summarize([account]))
    return 0


if __name__ == '__main__':
    sys.exit(main())
