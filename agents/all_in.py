# agents/all_in.py
class AllInAgent:
    def bet(self, **kw):
        return kw["tokens"]
