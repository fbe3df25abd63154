import concurrent.futures
import random
import string
import threading
import zlib

import isalbuf

HAMLET_SCENE = b"""
LAERTES

       O, fear me not.
       I stay too long: but here my father comes.

       Enter POLONIUS

       A double blessing is a double grace,
       Occasion smiles upon a second leave.

LORD POLONIUS

       Yet here, Laertes! aboard, aboard, for shame!
       The wind sits in the shoulder of your sail,
       And you are stay'd for. There; my blessing with thee!
       And these few precepts in thy memory
       See thou character. Give thy thoughts no tongue,
       Nor any unproportioned thought his act.
       Be thou familiar, but by no means vulgar.
       Those friends thou hast, and their adoption tried,
       Grapple them to thy soul with hoops of steel;
       But do not dull thy palm with entertainment
       Of each new-hatch'd, unfledged comrade. Beware
       Of entrance to a quarrel, but being in,
       Bear't that the opposed may beware of thee.
       Give every man thy ear, but few thy voice;
       Take each man's censure, but reserve thy judgment.
       Costly thy habit as thy purse can buy,
       But not express'd in fancy; rich, not gaudy;
       For the apparel oft proclaims the man,
       And they in France of the best rank and station
       Are of a most select and generous chief in that.
       Neither a borrower nor a lender be;
       For loan oft loses both itself and friend,
       And borrowing dulls the edge of husbandry.
       This above all: to thine ownself be true,
       And it must follow, as the night the day,
       Thou canst not then be false to any man.
       Farewell: my blessing season this in thee!
"""

NUM_THREADS = 10
NUM_ITERATIONS = 20
NUM_JOBS = 50  # To simulate 50 jobs running in 10 threads
barrier = threading.Barrier(parties=NUM_THREADS)


def compress_decompress_checksum():
    for _ in range(NUM_ITERATIONS):
        barrier.wait()
        x = isalbuf.compress(HAMLET_SCENE)
        assert isalbuf.decompress(x) == HAMLET_SCENE
        assert isalbuf.crc32(HAMLET_SCENE) == zlib.crc32(HAMLET_SCENE)

        length = len(HAMLET_SCENE)
        hamlet_random = HAMLET_SCENE + b"".join(
            [s.encode() for s in random.choices(string.printable, k=length)]
        )
        barrier.wait()
        x = isalbuf.compress(hamlet_random)
        assert isalbuf.decompress(x) == hamlet_random
        assert isalbuf.adler32(hamlet_random) == zlib.adler32(hamlet_random)


def test_compress_decompress_threaded():
    with concurrent.futures.ThreadPoolExecutor(NUM_THREADS) as executor:
        futures = [
            executor.submit(compress_decompress_checksum)
            for _ in range(NUM_JOBS)
        ]
        for future in concurrent.futures.as_completed(futures):
            future.result()  # To fire assertion error if there is one
