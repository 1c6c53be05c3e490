from wordpulse.main import main

main()
