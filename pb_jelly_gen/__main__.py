from pb_jelly_gen.gen import main

main()
