from usekeen_mcp.main import main

main()
