from readme_update.cli.main import main

if __name__ == "__main__":
    main()
