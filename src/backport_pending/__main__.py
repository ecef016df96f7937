from backport_pending.cli.main import main

if __name__ == "__main__":
    main(prog_name="backport-pending")
