from solver import run_solver
import sys


def cli():
    sys.exit(run_solver(sys.argv[1:]))


if __name__ == '__main__':
    cli()
