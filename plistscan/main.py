import datetime
import json
import sys
from twisted.python import log, usage
from plistscan.proplist import parseFile
from plistscan.nesting import DEFAULT_MAX_DEPTH
from plistscan.errors import PlistError
from plistscan.values import Data

class Options(usage.Options):
    synopsis = "plistscan [options] FILE"
    optFlags = [
        ["verbose", "v", "Log to stderr."],
    ]
    optParameters = [
        ["max-depth", "d", DEFAULT_MAX_DEPTH,
            "Maximum container nesting, 0 for no limit.", int],
    ]

    def parseArgs(self, plistPath):
        self["file"] = plistPath

def jsonDefault(value):
    "JSON has no dates and no binary blobs"
    if isinstance(value, datetime.datetime):
        return value.isoformat()
    if isinstance(value, Data):
        return value.text
    raise TypeError(repr(value))

def dump(plistPath, maxDepth, out):
    "Parse the file at plistPath and write it to out as JSON."
    with open(plistPath, "rb") as plistFile:
        tree = parseFile(plistFile, maxDepth=maxDepth)
    json.dump(tree, out, default=jsonDefault, indent=2)
    out.write("\n")

def run(argv, out=sys.stdout, err=sys.stderr):
    "Command line entry point. Return the exit status."
    options = Options()
    try:
        options.parseOptions(argv)
    except usage.UsageError as e:
        err.write("%s\n%s\n" % (e, options))
        return 2
    if options["verbose"]:
        log.startLogging(err, setStdout=False)
    maxDepth = options["max-depth"] or None
    try:
        dump(options["file"], maxDepth, out)
    except PlistError as e:
        log.msg("could not parse %s: %s" % (options["file"], e.reason))
        err.write("%s: %s\n" % (options["file"], e))
        return 1
    except IOError as e:
        log.msg("could not read %s: %s" % (options["file"], e.strerror))
        err.write("%s: %s\n" % (options["file"], e.strerror or e))
        return 1
    return 0

def main():
    "Console script entry point."
    sys.exit(run(sys.argv[1:]))

if __name__=="__main__":
    main()
