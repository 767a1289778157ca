from cpu_alerter.handler import handler


def main() -> None:
    handler()


if __name__ == "__main__":
    main()
