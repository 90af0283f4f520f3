from preset_color.app_shell.cli import main

main()
