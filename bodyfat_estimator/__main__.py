from bodyfat_estimator.cli import main

main()
